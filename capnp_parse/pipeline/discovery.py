"""
Schema file discovery.
"""

from __future__ import annotations

import glob
import logging
from collections.abc import Iterable
from pathlib import Path

logger = logging.getLogger(__name__)


def discover_schema_files(pattern: str, excludes: Iterable[str] = ()) -> list[Path]:
    """
    Find the schema files to compile.

    Args:
        pattern: Glob pattern, ``**`` matches any number of directories
        excludes: File names (not paths) to leave out

    Returns:
        Matching files, sorted
    """
    excluded = set(excludes)
    files = []
    for match in sorted(glob.glob(pattern, recursive=True, include_hidden=True)):
        path = Path(match)
        if not path.is_file():
            continue
        if path.name in excluded:
            logger.debug(f"Excluding {path}")
            continue
        files.append(path)
    logger.info(f"Discovered {len(files)} schema files (pattern={pattern})")
    return files
