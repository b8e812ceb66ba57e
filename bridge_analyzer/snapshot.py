"""Build an in-memory repository snapshot from a local checkout."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import AbstractSet, Dict, Optional

from . import config
from .languages import classify_language

logger = logging.getLogger(__name__)


def load_snapshot(
    root: Path,
    max_file_bytes: Optional[int] = None,
    skip_dirs: Optional[AbstractSet[str]] = None,
) -> Dict[str, str]:
    """Return ``{relative/posix/path: content}`` for every analyzable file.

    Files with an unknown language, oversized files and files that are not
    valid UTF-8 are left out.
    """
    limit = config.MAX_FILE_BYTES if max_file_bytes is None else max_file_bytes
    skipped = config.SNAPSHOT_SKIP_DIRS if skip_dirs is None else skip_dirs
    root = root.resolve()
    files: Dict[str, str] = {}

    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(d for d in dirnames if d not in skipped)
        for filename in sorted(filenames):
            file_path = Path(dirpath) / filename
            rel_path = file_path.relative_to(root).as_posix()
            if classify_language(rel_path) == "unknown":
                continue
            try:
                if file_path.stat().st_size > limit:
                    logger.debug("Skipping oversized file %s", rel_path)
                    continue
                files[rel_path] = file_path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as exc:
                logger.debug("Skipping unreadable file %s: %s", rel_path, exc)

    logger.info("Loaded %d files from %s", len(files), root)
    return dict(sorted(files.items()))
