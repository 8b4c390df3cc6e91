"""
Shared test fixtures and configuration.
"""

import logging
from pathlib import Path

import pytest

from schemas_to_ts.core.models import DirectoryLayout


@pytest.fixture
def strapi_root(tmp_path: Path) -> Path:
    """A minimal Strapi project tree on disk."""
    root = tmp_path / "proj"
    for folder in (
        "src/api",
        "src/components",
        "src/extensions",
        "src/policies",
        "src/middlewares",
        "config",
        "public",
        "dist",
    ):
        (root / folder).mkdir(parents=True)
    return root


@pytest.fixture
def layout(strapi_root: Path) -> DirectoryLayout:
    """Directory layout for ``strapi_root``."""
    return DirectoryLayout.from_root(strapi_root)


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo ``setup_logging`` so CLI runs don't leak handlers between tests."""
    yield
    logger = logging.getLogger("schemas_to_ts")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
