"""Dependency graph construction for a single target file.

:func:`build_graph` analyzes every file of a repository snapshot into a
:class:`RepoGraph`; :func:`analyze` combines that graph with the target
file to produce dependencies, dependents and importance scores.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Set

from .extractor import extract_exports, extract_imports
from .languages import classify_language, classify_role, file_name
from .models import (
    AnalysisRequest,
    AnalysisResult,
    DependencyNode,
    ExternalNode,
    GraphNode,
)
from .resolver import resolve_import
from .scoring import importance, inbound_counts, rank

logger = logging.getLogger(__name__)


@dataclass
class RepoGraph:
    """Resolved dependency paths and nodes for every snapshot file."""
    all_deps: Dict[str, List[str]] = field(default_factory=dict)
    all_nodes: Dict[str, DependencyNode] = field(default_factory=dict)
    inbound: Dict[str, int] = field(default_factory=dict)

    def score(self, node: DependencyNode) -> int:
        return importance(node.path, len(node.exports), self.inbound)

    def dependents_of(self, path: str) -> List[DependencyNode]:
        """Files other than *path* whose dependency list contains *path*."""
        found: List[DependencyNode] = []
        for importer in sorted(self.all_deps):
            if importer == path:
                continue
            if path in self.all_deps[importer] and importer in self.all_nodes:
                found.append(self.all_nodes[importer])
        return found


def analyze_file(
    path: str,
    content: str,
    repo_files: Mapping[str, str],
    dedupe: bool = False,
) -> DependencyNode:
    """Extract and resolve one file into an unscored node.

    With *dedupe*, only the first link to each resolved path is kept.
    """
    language = classify_language(path)
    node = DependencyNode(
        path=path,
        name=file_name(path),
        type=classify_role(path),
        language=language,
        exports=extract_exports(content, language),
    )

    seen: Set[str] = set()
    for link in extract_imports(content, language):
        resolution = resolve_import(path, link.target_path, repo_files)
        if dedupe:
            if resolution.path in seen:
                continue
            seen.add(resolution.path)
        node.dependencies.append(link.resolved_to(resolution.path))

    return node


def build_graph(repo_files: Mapping[str, str]) -> RepoGraph:
    graph = RepoGraph()

    for path in sorted(repo_files):
        node = analyze_file(path, repo_files[path], repo_files)
        graph.all_nodes[path] = node
        graph.all_deps[path] = [link.target_path for link in node.dependencies]

    # Scores need the complete inbound picture, so they come last.
    graph.inbound = inbound_counts(graph.all_deps)
    for node in graph.all_nodes.values():
        node.importance = graph.score(node)

    logger.debug("Built graph over %d snapshot files", len(graph.all_nodes))
    return graph


def _dependency_nodes(source: DependencyNode, graph: RepoGraph) -> List[GraphNode]:
    nodes: List[GraphNode] = []
    for link in source.dependencies:
        known = graph.all_nodes.get(link.target_path)
        if known is not None:
            nodes.append(known)
        else:
            nodes.append(ExternalNode(
                path=link.target_path,
                name=file_name(link.target_path),
                language=source.language,
            ))
    return nodes


def analyze(request: AnalysisRequest) -> AnalysisResult:
    """Build the dependency map around ``request.file_path``.

    Without a snapshot only the target's own imports are reported, each as
    an external node, and nothing can depend on it.
    """
    repo_files: Mapping[str, str] = request.repo_files or {}
    graph = build_graph(repo_files) if request.has_snapshot else RepoGraph()

    source = analyze_file(request.file_path, request.file_content, repo_files, dedupe=True)
    source.importance = graph.score(source)

    result = AnalysisResult(
        source_file=source,
        dependencies=rank(_dependency_nodes(source, graph)),
        dependents=rank(graph.dependents_of(request.file_path)),
    )

    logger.info(
        "Analyzed %s: %d dependencies, %d dependents",
        request.file_path, len(result.dependencies), len(result.dependents),
    )
    return result
