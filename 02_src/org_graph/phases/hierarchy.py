"""Circle nesting levels derived from the first super-circle reference."""

from typing import Any, Dict

from ..graph_model import CircleNode
from ..graph_orchestrator import GraphOrchestrator
from ..pipeline import PipelinePhase

ROOT_LEVEL = 0
CHILD_LEVEL = 1
GRANDCHILD_LEVEL = 2


class HierarchyPhase(PipelinePhase):
    phase_name = "hierarchy"

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        orchestrator: GraphOrchestrator = context["orchestrator"]
        levels: Dict[int, int] = {ROOT_LEVEL: 0, CHILD_LEVEL: 0, GRANDCHILD_LEVEL: 0}
        for circle in orchestrator.state.circles:
            circle.level = self.compute_level(circle, orchestrator)
            levels[circle.level] += 1
        return {"hierarchy_report": {"levels": levels}}

    @staticmethod
    def compute_level(circle: CircleNode, orchestrator: GraphOrchestrator) -> int:
        # Depth is capped at three displayed levels; extra parents are ignored here.
        if not circle.super_circle_source_ids:
            return ROOT_LEVEL
        parent = orchestrator.circle_for(circle.super_circle_source_ids[0])
        if parent is None or not parent.super_circle_source_ids:
            return CHILD_LEVEL
        return GRANDCHILD_LEVEL
