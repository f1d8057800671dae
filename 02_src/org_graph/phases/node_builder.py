"""Node builder phase: raw circle and person records to typed nodes."""

from typing import Any, Dict, List

from ..graph_orchestrator import GraphOrchestrator
from ..pipeline import PipelinePhase
from ..properties import extract_relation_ids, extract_select, extract_text, get_property

DEFAULT_STATUS = "Active"
DEFAULT_PLACEHOLDER_NAME = "Circle [Name]"


class NodeBuilderPhase(PipelinePhase):
    phase_name = "node_builder"

    def __init__(self, placeholder_name: str = DEFAULT_PLACEHOLDER_NAME) -> None:
        self._placeholder_name = placeholder_name

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        orchestrator: GraphOrchestrator = context["orchestrator"]
        skipped: List[str] = []

        for record in context.get("circle_records", []):
            name = extract_text(get_property(record, "Name"))
            if name == self._placeholder_name:
                skipped.append(self._source_id(record))
                continue
            orchestrator.add_circle(
                source_id=self._source_id(record),
                name=name,
                purpose=extract_text(get_property(record, "Purpose")),
                status=extract_select(get_property(record, "Status")) or DEFAULT_STATUS,
                super_circle_source_ids=extract_relation_ids(get_property(record, "Super-circle")),
                lead_role_source_ids=extract_relation_ids(get_property(record, "Circle Lead")),
                rep_role_source_ids=extract_relation_ids(get_property(record, "Circle Rep")),
            )

        for record in context.get("person_records", []):
            full_name = extract_text(get_property(record, "Name"))
            orchestrator.add_person(
                source_id=self._source_id(record),
                name=extract_text(get_property(record, "First Name")) or full_name,
                full_name=full_name,
                status=extract_select(get_property(record, "Person Status")) or DEFAULT_STATUS,
                circle_membership_source_ids=extract_relation_ids(
                    get_property(record, "Circle Memberships")
                ),
                role_source_ids=extract_relation_ids(get_property(record, "Roles")),
            )

        return {
            "node_report": {
                "circle_count": len(orchestrator.state.circles),
                "person_count": len(orchestrator.state.people),
                "skipped_placeholders": skipped,
            }
        }

    @staticmethod
    def _source_id(record: Any) -> str:
        return str(record.get("id", "")) if isinstance(record, dict) else ""
