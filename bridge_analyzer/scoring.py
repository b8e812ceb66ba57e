"""Importance heuristic used to rank graph nodes."""

from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Sequence, Tuple, TypeVar

INBOUND_WEIGHT = 10
EXPORT_WEIGHT = 2

# Checked in order; the first matching segment wins.
PATH_BONUSES: Sequence[Tuple[Tuple[str, ...], int]] = (
    (("/lib/", "/utils/"), 5),
    (("/components/",), 3),
    (("/types/",), 4),
)

N = TypeVar("N")


def path_bonus(path: str) -> int:
    for segments, bonus in PATH_BONUSES:
        if any(segment in path for segment in segments):
            return bonus
    return 0


def inbound_counts(all_deps: Mapping[str, Iterable[str]]) -> Dict[str, int]:
    """Count, per path, the distinct other files that depend on it."""
    counts: Dict[str, int] = {}
    for importer, deps in all_deps.items():
        for dep in set(deps):
            if dep != importer:
                counts[dep] = counts.get(dep, 0) + 1
    return counts


def importance(path: str, export_count: int, inbound: Mapping[str, int]) -> int:
    return (
        INBOUND_WEIGHT * inbound.get(path, 0)
        + EXPORT_WEIGHT * export_count
        + path_bonus(path)
    )


def rank(nodes: Iterable[N]) -> List[N]:
    """Sort by descending importance, then by path for stable output."""
    return sorted(nodes, key=lambda node: (-node.importance, node.path))
