"""Per-language import/export pattern catalog.

The catalog is built once at import time and never mutated afterwards, so
any number of concurrent analyses may read it without locking.

Each import pattern declares its *shape*, which names the groups it can
populate.  The extractor branches on the shape instead of counting groups:

``combined``     ``default`` and/or ``named`` bindings plus ``target``
``namespace``    ``alias`` plus ``target``
``target_only``  ``target`` only (side-effect, dynamic, require)
``from_import``  ``target`` plus a comma-separated ``names`` list
``module``       ``target`` only, bound as a default import
``import_block`` ``block`` body holding one quoted path per line
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Literal, Mapping, Optional, Tuple

ImportShape = Literal["combined", "namespace", "target_only", "from_import", "module", "import_block"]
PatternScope = Literal["line", "content"]


@dataclass(frozen=True)
class ImportPattern:
    regex: re.Pattern[str]
    shape: ImportShape
    # "content" patterns span several lines and run once over the whole file
    scope: PatternScope = "line"


@dataclass(frozen=True)
class LanguagePatterns:
    imports: Tuple[ImportPattern, ...]
    exports: Tuple[re.Pattern[str], ...]


def _imp(expr: str, shape: ImportShape, scope: PatternScope = "line") -> ImportPattern:
    return ImportPattern(re.compile(expr), shape, scope)


def _exp(expr: str) -> re.Pattern[str]:
    return re.compile(expr, re.MULTILINE)


# ===================================================================
# JavaScript family
# ===================================================================

_JS_TAIL_IMPORTS = (
    _imp(r"""^import\s+\*\s+as\s+(?P<alias>\w+)\s+from\s*['"](?P<target>[^'"]+)['"]""", "namespace"),
    _imp(r"""^import\s+['"](?P<target>[^'"]+)['"]""", "target_only"),
    # Dynamic imports
    _imp(r"""import\(['"](?P<target>[^'"]+)['"]\)""", "target_only"),
    _imp(r"""require\(['"](?P<target>[^'"]+)['"]\)""", "target_only"),
)

_TYPESCRIPT = LanguagePatterns(
    imports=(
        _imp(
            r"""^import\s+(?:type\s+)?(?:(?P<default>\w+)(?:\s*,\s*)?)?"""
            r"""(?:\{(?P<named>[^}]+)\})?\s*from\s*['"](?P<target>[^'"]+)['"]""",
            "combined",
        ),
    ) + _JS_TAIL_IMPORTS,
    exports=(
        _exp(r"^export\s+(?:default\s+)?(?:async\s+)?(?:function|class|const|let|var|interface|type|enum)\s+(\w+)"),
        _exp(r"^export\s+\{([^}]+)\}"),
        _exp(r"^export\s+default"),
    ),
)

_JAVASCRIPT = LanguagePatterns(
    imports=(
        _imp(
            r"""^import\s+(?:(?P<default>\w+)(?:\s*,\s*)?)?"""
            r"""(?:\{(?P<named>[^}]+)\})?\s*from\s*['"](?P<target>[^'"]+)['"]""",
            "combined",
        ),
    ) + _JS_TAIL_IMPORTS,
    exports=(
        _exp(r"^export\s+(?:default\s+)?(?:async\s+)?(?:function|class|const|let|var)\s+(\w+)"),
        _exp(r"^export\s+\{([^}]+)\}"),
        _exp(r"^export\s+default"),
        _exp(r"module\.exports\s*="),
    ),
)

# ===================================================================
# Python, Go, Rust
# ===================================================================

_PYTHON = LanguagePatterns(
    imports=(
        _imp(r"^from\s+(?P<target>[.\w]+)\s+import\s+(?P<names>.+)", "from_import"),
        _imp(r"^import\s+(?P<target>[.\w]+)(?:\s+as\s+\w+)?", "module"),
    ),
    exports=(
        _exp(r"^def\s+(\w+)\s*\("),
        _exp(r"^class\s+(\w+)"),
        _exp(r"^(\w+)\s*="),
    ),
)

_GO = LanguagePatterns(
    imports=(
        _imp(r"import\s*\((?P<block>[^)]*)\)", "import_block", scope="content"),
        _imp(r'import\s+"(?P<target>[^"]+)"', "module"),
    ),
    exports=(
        _exp(r"^func\s+([A-Z]\w*)"),
        _exp(r"^type\s+([A-Z]\w*)"),
        _exp(r"^var\s+([A-Z]\w*)"),
        _exp(r"^const\s+([A-Z]\w*)"),
    ),
)

_RUST = LanguagePatterns(
    imports=(
        _imp(r"^use\s+(?P<target>[^;]+);", "module"),
        _imp(r"^mod\s+(?P<target>\w+);", "module"),
    ),
    exports=(
        _exp(r"^pub\s+fn\s+(\w+)"),
        _exp(r"^pub\s+struct\s+(\w+)"),
        _exp(r"^pub\s+enum\s+(\w+)"),
        _exp(r"^pub\s+trait\s+(\w+)"),
    ),
)

CATALOG: Mapping[str, LanguagePatterns] = MappingProxyType({
    "typescript": _TYPESCRIPT,
    "javascript": _JAVASCRIPT,
    "python": _PYTHON,
    "go": _GO,
    "rust": _RUST,
})


def patterns_for(language: str) -> Optional[LanguagePatterns]:
    """Return the pattern set for *language*, or None when it has none."""
    return CATALOG.get(language)
