"""Deterministic orchestrator for graph state mutations."""

from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Optional

from .graph_model import CircleNode, GraphEdge, GraphState, PersonNode


class GraphOrchestrator:
    """Owns short identifiers, source-id lookups and safe updates of graph state.

    Short ids are indices into two arenas (circles, people), so ``circle-3`` is
    always ``state.circles[3]``. The source-id lookups are filled while nodes are
    registered and are only read afterwards.
    """

    def __init__(self) -> None:
        self.state = GraphState()
        self._circles_by_source: Dict[str, CircleNode] = {}
        self._people_by_source: Dict[str, PersonNode] = {}
        self._node_ids: set[str] = set()

    def add_circle(self, source_id: str, name: str, **properties: Any) -> CircleNode:
        node = CircleNode(
            id=self._build_id("circle", len(self.state.circles)),
            source_id=source_id,
            name=name,
            **properties,
        )
        self.state.circles.append(node)
        self._circles_by_source.setdefault(source_id, node)
        self._node_ids.add(node.id)
        return node

    def add_person(self, source_id: str, name: str, **properties: Any) -> PersonNode:
        node = PersonNode(
            id=self._build_id("person", len(self.state.people)),
            source_id=source_id,
            name=name,
            **properties,
        )
        self.state.people.append(node)
        self._people_by_source.setdefault(source_id, node)
        self._node_ids.add(node.id)
        return node

    @property
    def circle_lookup(self) -> Mapping[str, CircleNode]:
        """Read-only view of the source-id lookup filled by ``add_circle``."""
        return MappingProxyType(self._circles_by_source)

    def circle_for(self, source_id: str) -> Optional[CircleNode]:
        return self._circles_by_source.get(source_id)

    def person_for(self, source_id: str) -> Optional[PersonNode]:
        return self._people_by_source.get(source_id)

    def add_edge(self, edge: GraphEdge) -> GraphEdge:
        if edge.source not in self._node_ids:
            raise ValueError(f"Unknown source node: {edge.source}")
        if edge.target not in self._node_ids:
            raise ValueError(f"Unknown target node: {edge.target}")
        self.state.edges.append(edge)
        return edge

    def add_edges(self, edges: Iterable[GraphEdge]) -> int:
        added = 0
        for edge in edges:
            self.add_edge(edge)
            added += 1
        return added

    @staticmethod
    def _build_id(prefix: str, index: int) -> str:
        return f"{prefix}-{index}"
