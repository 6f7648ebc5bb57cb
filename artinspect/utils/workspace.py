#!/usr/bin/env python3
"""Scoped temporary working directories."""

import shutil
import tempfile
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from ..core.constants import WORKSPACE_PREFIX
from .logger import get_logger

logger = get_logger(__name__)


@contextmanager
def temporary_workspace(root: str | Path | None = None) -> Iterator[Path]:
    """
    Create a private, UUID-named directory and remove it on exit.

    The directory is removed whether the body returns normally, returns
    early or raises.

    Args:
        root: Parent directory (system temp directory when None)

    Yields:
        Path of the freshly created directory
    """
    parent = Path(root) if root is not None else Path(tempfile.gettempdir())
    workspace = parent / f"{WORKSPACE_PREFIX}{uuid.uuid4()}"
    workspace.mkdir(parents=True, mode=0o700)
    logger.debug(f"Created workspace {workspace}")
    try:
        yield workspace
    finally:
        shutil.rmtree(workspace, ignore_errors=True)
        logger.debug(f"Removed workspace {workspace}")
