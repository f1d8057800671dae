"""Core package for the organization network graph."""

from .errors import SourceUnavailable
from .graph_model import CircleNode, GraphEdge, GraphState, PersonNode
from .graph_orchestrator import GraphOrchestrator
from .pipeline import PipelinePhase, PipelineRunner
from .service import build_graph, build_graph_from_records

__all__ = [
    "CircleNode",
    "PersonNode",
    "GraphEdge",
    "GraphState",
    "GraphOrchestrator",
    "PipelinePhase",
    "PipelineRunner",
    "SourceUnavailable",
    "build_graph",
    "build_graph_from_records",
]
