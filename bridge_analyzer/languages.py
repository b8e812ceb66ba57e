"""File classification: language tag, file role and display name."""

from __future__ import annotations

from typing import Dict

from .models import FileRole, Language

# ---------------------------------------------------------------------------
# Language <-> file-extension mapping
# ---------------------------------------------------------------------------
LANGUAGE_MAP: Dict[str, Language] = {
    ".ts": "typescript",
    ".tsx": "typescript",
    ".js": "javascript",
    ".jsx": "javascript",
    ".mjs": "javascript",
    ".py": "python",
    ".go": "go",
    ".rs": "rust",
    ".css": "css",
    ".scss": "css",
    ".sass": "css",
    ".json": "json",
}

PAGE_SUFFIXES = ("page.tsx", "page.ts")
CONFIG_SUFFIXES = (".config.ts", ".config.js", ".json")
STYLE_SUFFIXES = (".css", ".scss")


def file_name(path: str) -> str:
    """Return the last ``/``-separated segment of *path*."""
    return path.rsplit("/", 1)[-1]


def _suffix(path: str) -> str:
    name = file_name(path).lower()
    dot = name.rfind(".")
    return name[dot:] if dot >= 0 else ""


def classify_language(path: str) -> Language:
    return LANGUAGE_MAP.get(_suffix(path), "unknown")


def classify_role(path: str) -> FileRole:
    """Coarse role of a file, decided by the first matching rule.

    Directory segments are checked before file-name suffixes, so
    ``src/components/app.config.ts`` is a component, not config.
    """
    name = file_name(path)

    if "/components/" in path:
        return "component"
    if "/lib/" in path or "/utils/" in path:
        return "utility"
    if "/types/" in path:
        return "type"
    if "/api/" in path:
        return "api"
    if "/app/" in path and name.endswith(PAGE_SUFFIXES):
        return "page"
    if name.endswith(CONFIG_SUFFIXES):
        return "config"
    if name.endswith(STYLE_SUFFIXES):
        return "style"
    return "file"
