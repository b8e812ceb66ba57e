"""Resolve raw import specifiers to repository paths."""

from __future__ import annotations

import logging
from typing import Mapping, Tuple

from .extractor import is_external
from .models import Resolution

logger = logging.getLogger(__name__)

SOURCE_ALIAS = "@/"
SOURCE_ALIAS_TARGET = "src/"

# Probe order: exact path, then file extensions, then directory index files.
PROBE_SUFFIXES: Tuple[str, ...] = (
    "",
    ".ts",
    ".tsx",
    ".js",
    ".jsx",
    "/index.ts",
    "/index.tsx",
    "/index.js",
    "/index.jsx",
)


def source_dir(path: str) -> str:
    idx = path.rfind("/")
    return path[:idx] if idx >= 0 else ""


def _join_relative(base_dir: str, target: str) -> str:
    if target.startswith("./"):
        return base_dir + "/" + target[2:]

    if target.startswith("../"):
        dir_parts = base_dir.split("/")
        target_parts = target.split("/")
        up = 0
        for part in target_parts:
            if part != "..":
                break
            up += 1
        if up > len(dir_parts):
            return ""
        kept = dir_parts[: len(dir_parts) - up]
        return "/".join(kept) + "/" + "/".join(target_parts[up:])

    return target


def _clean(path: str) -> str:
    path = path.replace("//", "/")
    if path.startswith("/"):
        path = path[1:]
    return path


def resolve_import(source_path: str, target: str, repo_files: Mapping[str, str]) -> Resolution:
    """Map *target*, imported from *source_path*, onto the snapshot.

    Package-style specifiers are returned unchanged.  Otherwise the alias
    and relative segments are applied and the result is probed against the
    snapshot keys; when nothing matches the cleaned path is returned
    unconfirmed.
    """
    if is_external(target, "typescript"):
        return Resolution(path=target, external=True)

    if target.startswith(SOURCE_ALIAS):
        target = SOURCE_ALIAS_TARGET + target[len(SOURCE_ALIAS):]

    resolved = _clean(_join_relative(source_dir(source_path), target))

    for suffix in PROBE_SUFFIXES:
        candidate = resolved + suffix
        if candidate in repo_files:
            return Resolution(path=candidate, confirmed=True)

    logger.debug("Unresolved import '%s' from %s", target, source_path)
    return Resolution(path=resolved)
