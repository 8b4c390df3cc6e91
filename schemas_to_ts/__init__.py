"""
schemas-to-ts output manager.

Places the TypeScript interfaces produced by the schema compiler inside a
Strapi project: destination resolution, write-if-changed, stale cleanup and
barrel (index.ts) generation.
"""

__version__ = "0.1.0"
