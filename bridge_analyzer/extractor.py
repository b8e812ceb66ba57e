"""Pattern-based import and export extraction."""

from __future__ import annotations

import re
from typing import List, Optional, Tuple

from .models import DependencyLink
from .patterns import ImportPattern, patterns_for

_LOCAL_JS_PREFIXES = (".", "@/", "~/")
_LOCAL_RUST_PREFIXES = ("crate::", "self::", "super::")


def is_external(target: str, language: str) -> bool:
    """Whether *target* points outside the repository for *language*."""
    if language in ("typescript", "javascript"):
        return not target.startswith(_LOCAL_JS_PREFIXES)
    if language == "python":
        return not target.startswith(".")
    if language == "go":
        return "/" in target
    if language == "rust":
        return not target.startswith(_LOCAL_RUST_PREFIXES)
    return True


def _split_names(raw: Optional[str]) -> List[str]:
    if not raw:
        return []
    return [name.strip() for name in raw.split(",") if name.strip()]


def _last_block_entry(block: str) -> str:
    # Every entry overwrites the previous one; only the last survives.
    target = ""
    for entry in block.split("\n"):
        entry = entry.strip().strip('"')
        if entry and not entry.startswith("//"):
            target = entry
    return target


def _link_from_match(
    match: re.Match[str],
    pattern: ImportPattern,
    language: str,
    line_number: int,
) -> Optional[DependencyLink]:
    groups = match.groupdict()
    shape = pattern.shape
    names: List[str] = []

    if shape == "combined":
        target = groups["target"]
        kind = "sideEffect"
        if groups.get("default"):
            kind = "default"
            names = [groups["default"]]
        if groups.get("named"):
            kind = "named"
            names = _split_names(groups["named"])
    elif shape == "namespace":
        target = groups["target"]
        kind = "namespace"
        names = [groups["alias"]]
    elif shape == "target_only":
        target = groups["target"]
        kind = "sideEffect"
    elif shape == "from_import":
        target = groups["target"]
        kind = "named"
        names = _split_names(groups["names"])
    elif shape == "import_block":
        target = _last_block_entry(groups["block"])
        kind = "default"
    else:
        target = groups["target"]
        kind = "default"

    if not target:
        return None

    return DependencyLink(
        target_path=target,
        import_type=kind,
        line_number=line_number,
        import_names=names,
        is_external=is_external(target, language),
    )


def extract_imports(content: str, language: str) -> List[DependencyLink]:
    """Return every import occurrence in *content*, ordered by line.

    All patterns are tried on every line and every match is kept, so one
    line can produce several links.
    """
    patterns = patterns_for(language)
    if patterns is None:
        return []

    found: List[Tuple[int, int, DependencyLink]] = []
    lines = content.split("\n")

    for order, pattern in enumerate(patterns.imports):
        if pattern.scope == "content":
            for match in pattern.regex.finditer(content):
                line_number = content.count("\n", 0, match.start()) + 1
                link = _link_from_match(match, pattern, language, line_number)
                if link is not None:
                    found.append((line_number, order, link))
            continue

        for index, line in enumerate(lines):
            for match in pattern.regex.finditer(line):
                link = _link_from_match(match, pattern, language, index + 1)
                if link is not None:
                    found.append((index + 1, order, link))

    found.sort(key=lambda item: (item[0], item[1]))
    return [link for _, _, link in found]


def extract_exports(content: str, language: str) -> List[str]:
    """Return exported names in first-seen order without duplicates."""
    patterns = patterns_for(language)
    if patterns is None:
        return []

    exports: List[str] = []
    seen = set()

    for regex in patterns.exports:
        if regex.groups < 1:
            continue
        for match in regex.finditer(content):
            for name in _split_names(match.group(1)):
                if name not in seen:
                    seen.add(name)
                    exports.append(name)

    return exports
