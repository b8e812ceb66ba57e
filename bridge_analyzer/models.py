"""Data models shared by extraction, resolution and graph building.

Every object here is created fresh for a single analysis request.  The
``to_dict`` helpers produce the camelCase wire shape that graph-rendering
clients consume, and :meth:`AnalysisRequest.from_dict` is the only place
where untrusted input is validated.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Literal, Mapping, Optional, Union

Language = Literal["typescript", "javascript", "python", "go", "rust", "css", "json", "unknown"]
ImportKind = Literal["default", "named", "namespace", "sideEffect"]
FileRole = Literal["component", "utility", "type", "api", "page", "config", "style", "file"]

EXTERNAL_ROLE = "external"


class InvalidRequestError(ValueError):
    """Raised when an analysis request payload is malformed."""


@dataclass
class DependencyLink:
    """One import statement as it appears in a file."""
    target_path: str
    import_type: ImportKind
    line_number: int
    import_names: List[str] = field(default_factory=list)
    is_external: bool = False

    def resolved_to(self, path: str) -> "DependencyLink":
        """Return a copy pointing at *path*; kind, names and line are kept."""
        return replace(self, target_path=path, import_names=list(self.import_names))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "targetPath": self.target_path,
            "importType": self.import_type,
            "importNames": list(self.import_names),
            "lineNumber": self.line_number,
            "isExternal": self.is_external,
        }


@dataclass
class DependencyNode:
    """A repository file with its outgoing links and exported names."""
    path: str
    name: str
    type: str
    language: Language
    importance: int = 0
    dependencies: List[DependencyLink] = field(default_factory=list)
    exports: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "path": self.path,
            "name": self.name,
            "type": self.type,
            "importance": self.importance,
            "dependencies": [link.to_dict() for link in self.dependencies],
            "exports": list(self.exports),
            "language": self.language,
        }


@dataclass(frozen=True)
class ExternalNode:
    """Placeholder for a dependency target that is not in the snapshot.

    Carries the importing file's language, not the target's.
    """
    path: str
    name: str
    language: Language

    type: str = EXTERNAL_ROLE
    importance: int = 0

    @property
    def dependencies(self) -> List[DependencyLink]:
        return []

    @property
    def exports(self) -> List[str]:
        return []

    def to_dict(self) -> Dict[str, Any]:
        return {
            "path": self.path,
            "name": self.name,
            "type": self.type,
            "importance": self.importance,
            "dependencies": [],
            "exports": [],
            "language": self.language,
        }


GraphNode = Union[DependencyNode, ExternalNode]


@dataclass(frozen=True)
class Resolution:
    """Outcome of resolving one import specifier.

    ``external`` is set when the specifier was returned untouched as a
    package-style name; ``confirmed`` only when ``path`` is a snapshot key.
    """
    path: str
    external: bool = False
    confirmed: bool = False


@dataclass
class AnalysisRequest:
    file_path: str
    file_content: str
    repo_files: Optional[Dict[str, str]] = None
    owner: str = ""
    repo: str = ""

    @property
    def has_snapshot(self) -> bool:
        return self.repo_files is not None

    @classmethod
    def from_dict(cls, payload: Any) -> "AnalysisRequest":
        """Build a request from decoded JSON, validating field types."""
        if not isinstance(payload, Mapping):
            raise InvalidRequestError("request body must be a JSON object")

        file_path = payload.get("filePath", "")
        file_content = payload.get("fileContent", "")
        for key, value in (("filePath", file_path), ("fileContent", file_content)):
            if not isinstance(value, str):
                raise InvalidRequestError(f"'{key}' must be a string")

        repo_files = payload.get("repoFiles")
        if repo_files is not None:
            if not isinstance(repo_files, Mapping):
                raise InvalidRequestError("'repoFiles' must be an object of path -> content")
            for path, content in repo_files.items():
                if not isinstance(path, str) or not isinstance(content, str):
                    raise InvalidRequestError("'repoFiles' keys and values must be strings")
            repo_files = dict(repo_files)

        owner = payload.get("owner") or ""
        repo = payload.get("repo") or ""
        if not isinstance(owner, str) or not isinstance(repo, str):
            raise InvalidRequestError("'owner' and 'repo' must be strings")

        return cls(
            file_path=file_path,
            file_content=file_content,
            repo_files=repo_files,
            owner=owner,
            repo=repo,
        )


@dataclass
class AnalysisResult:
    source_file: DependencyNode
    dependencies: List[GraphNode] = field(default_factory=list)
    dependents: List[DependencyNode] = field(default_factory=list)

    @property
    def total_nodes(self) -> int:
        return len(self.dependencies) + len(self.dependents) + 1

    @property
    def total_edges(self) -> int:
        return len(self.dependencies) + len(self.dependents)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "sourceFile": self.source_file.to_dict(),
            "dependencies": [node.to_dict() for node in self.dependencies],
            "dependents": [node.to_dict() for node in self.dependents],
            "totalNodes": self.total_nodes,
            "totalEdges": self.total_edges,
        }
