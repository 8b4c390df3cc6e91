"""
Services — the filesystem operations of a generation run.

Leaves first: path_safety, destination_paths, artifact_writer,
stale_collector, index_aggregator.
"""
