"""Bridge analyzer: multi-language dependency maps for a single file."""

from .graph import analyze
from .models import AnalysisRequest, AnalysisResult, DependencyLink, DependencyNode, ExternalNode

__version__ = "0.1.0"

__all__ = [
    "AnalysisRequest",
    "AnalysisResult",
    "DependencyLink",
    "DependencyNode",
    "ExternalNode",
    "analyze",
    "__version__",
]
