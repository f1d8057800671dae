"""Pipeline phases for organization graph construction."""

from .assembly import AssemblyPhase
from .edge_resolver import EdgeResolverPhase
from .hierarchy import HierarchyPhase
from .node_builder import NodeBuilderPhase

__all__ = [
    "NodeBuilderPhase",
    "HierarchyPhase",
    "EdgeResolverPhase",
    "AssemblyPhase",
]
