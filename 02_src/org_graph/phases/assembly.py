"""Assembly phase: public node view, edges and summary meta."""

from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

from ..graph_model import CircleNode, Node
from ..graph_orchestrator import GraphOrchestrator
from ..pipeline import PipelinePhase

DEFAULT_PAGE_URL = "https://notion.so"
DEFAULT_SOURCE_LABEL = "Notion API - live query"


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class AssemblyPhase(PipelinePhase):
    phase_name = "assembly"

    def __init__(
        self,
        page_url: str = DEFAULT_PAGE_URL,
        source_label: str = DEFAULT_SOURCE_LABEL,
        clock: Optional[Callable[[], str]] = None,
    ) -> None:
        self._page_url = page_url.rstrip("/")
        self._source_label = source_label
        self._clock = clock or utc_timestamp

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        orchestrator: GraphOrchestrator = context["orchestrator"]
        state = orchestrator.state

        nodes = [self._public_node(node) for node in [*state.circles, *state.people]]
        edges = [
            {"source": edge.source, "target": edge.target, "type": edge.type, "label": edge.label}
            for edge in state.edges
        ]
        graph = {
            "nodes": nodes,
            "edges": edges,
            "meta": {
                "circleCount": self._count(nodes, "circle"),
                "personCount": self._count(nodes, "person"),
                "edgeCount": len(edges),
                "timestamp": self._clock(),
                "source": self._source_label,
            },
        }
        return {"graph": graph}

    def _public_node(self, node: Node) -> Dict[str, Any]:
        public: Dict[str, Any] = {"id": node.id, "name": node.name}
        if isinstance(node, CircleNode):
            public.update(
                fullName=node.name,
                purpose=node.purpose,
                status=node.status,
                nodeType=node.node_type,
                level=node.level,
            )
        else:
            public.update(
                fullName=node.full_name or node.name,
                purpose="",
                status=node.status,
                nodeType=node.node_type,
            )
        public["notionUrl"] = self.page_url(node.source_id)
        return public

    def page_url(self, source_id: str) -> str:
        return f"{self._page_url}/{source_id.replace('-', '')}"

    @staticmethod
    def _count(nodes: List[Dict[str, Any]], node_type: str) -> int:
        return sum(1 for node in nodes if node["nodeType"] == node_type)
