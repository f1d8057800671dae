"""Edge derivation phase powered by a fixed-order LangGraph workflow."""

import logging
from typing import Any, Dict, List, Mapping

from langgraph.graph import END, START, StateGraph
from typing_extensions import TypedDict

from ..graph_model import (
    ENERGIZES,
    LEADS,
    REPRESENTS,
    ROLE_EDGE_TYPES,
    SUBCIRCLE,
    CircleNode,
    GraphEdge,
    PersonNode,
)
from ..graph_orchestrator import GraphOrchestrator
from ..pipeline import PipelinePhase

logger = logging.getLogger(__name__)


class EdgeState(TypedDict):
    circles: List[CircleNode]
    people: List[PersonNode]
    circle_lookup: Mapping[str, CircleNode]
    edges: List[GraphEdge]


class EdgeResolverPhase(PipelinePhase):
    """Derives subcircle, leads, represents and energizes edges, in that order.

    Membership suppression looks back at already derived role edges, so the
    workflow order is part of the contract.
    """

    phase_name = "edge_resolver"

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        orchestrator: GraphOrchestrator = context["orchestrator"]
        circles = orchestrator.state.circles

        workflow = self._build_workflow()
        result_state = workflow.invoke(
            {
                "circles": list(circles),
                "people": list(orchestrator.state.people),
                "circle_lookup": orchestrator.circle_lookup,
                "edges": [],
            }
        )

        edges: List[GraphEdge] = result_state.get("edges", [])
        orchestrator.add_edges(edges)

        counts = {edge_type: 0 for edge_type in (SUBCIRCLE, LEADS, REPRESENTS, ENERGIZES)}
        for edge in edges:
            counts[edge.type] += 1
        logger.debug("Derived edges: %s", counts)
        return {"edge_report": {"total": len(edges), "by_type": counts}}

    def _build_workflow(self):
        graph = StateGraph(EdgeState)
        graph.add_node("subcircle_edges", self._subcircle_edges)
        graph.add_node("lead_edges", self._lead_edges)
        graph.add_node("rep_edges", self._rep_edges)
        graph.add_node("membership_edges", self._membership_edges)
        graph.add_edge(START, "subcircle_edges")
        graph.add_edge("subcircle_edges", "lead_edges")
        graph.add_edge("lead_edges", "rep_edges")
        graph.add_edge("rep_edges", "membership_edges")
        graph.add_edge("membership_edges", END)
        return graph.compile()

    def _subcircle_edges(self, state: EdgeState) -> Dict[str, Any]:
        circle_lookup = state["circle_lookup"]
        derived = [
            GraphEdge(source=circle.id, target=circle_lookup[parent_ref].id, type=SUBCIRCLE)
            for circle in state["circles"]
            for parent_ref in circle.super_circle_source_ids
            if parent_ref in circle_lookup
        ]
        return {"edges": state["edges"] + derived}

    def _lead_edges(self, state: EdgeState) -> Dict[str, Any]:
        derived = self._role_edges(state, "lead_role_source_ids", LEADS)
        return {"edges": state["edges"] + derived}

    def _rep_edges(self, state: EdgeState) -> Dict[str, Any]:
        derived = self._role_edges(state, "rep_role_source_ids", REPRESENTS)
        return {"edges": state["edges"] + derived}

    @staticmethod
    def _role_edges(state: EdgeState, role_field: str, edge_type: str) -> List[GraphEdge]:
        # circles x roles x people scan; volumes stay in the tens to low hundreds,
        # and this nesting fixes the edge order.
        derived: List[GraphEdge] = []
        for circle in state["circles"]:
            for role_ref in getattr(circle, role_field):
                for person in state["people"]:
                    if role_ref in person.role_source_ids:
                        derived.append(GraphEdge(source=person.id, target=circle.id, type=edge_type))
        return derived

    def _membership_edges(self, state: EdgeState) -> Dict[str, Any]:
        circle_lookup = state["circle_lookup"]
        edges = list(state["edges"])
        for person in state["people"]:
            for membership_ref in person.circle_membership_source_ids:
                circle = circle_lookup.get(membership_ref)
                if circle is None:
                    continue
                circle_id = circle.id
                if any(
                    edge.source == person.id and edge.target == circle_id and edge.type in ROLE_EDGE_TYPES
                    for edge in edges
                ):
                    continue
                edges.append(GraphEdge(source=person.id, target=circle_id, type=ENERGIZES))
        return {"edges": edges}
