"""Node and edge primitives for the organization graph."""

from dataclasses import dataclass, field
from typing import Dict, List, Union

SUBCIRCLE = "subcircle"
LEADS = "leads"
REPRESENTS = "represents"
ENERGIZES = "energizes"

EDGE_LABELS: Dict[str, str] = {
    SUBCIRCLE: "Sub-circle of",
    LEADS: "Circle Lead",
    REPRESENTS: "Circle Rep",
    ENERGIZES: "Member",
}

# Membership is suppressed when one of these already links the same pair.
ROLE_EDGE_TYPES = frozenset({LEADS, REPRESENTS})


@dataclass
class CircleNode:
    id: str
    source_id: str
    name: str
    purpose: str = ""
    status: str = "Active"
    level: int = 0
    super_circle_source_ids: List[str] = field(default_factory=list)
    lead_role_source_ids: List[str] = field(default_factory=list)
    rep_role_source_ids: List[str] = field(default_factory=list)
    node_type: str = field(default="circle", init=False)


@dataclass
class PersonNode:
    id: str
    source_id: str
    name: str
    full_name: str = ""
    status: str = "Active"
    circle_membership_source_ids: List[str] = field(default_factory=list)
    role_source_ids: List[str] = field(default_factory=list)
    node_type: str = field(default="person", init=False)


Node = Union[CircleNode, PersonNode]


@dataclass
class GraphEdge:
    source: str
    target: str
    type: str
    label: str = ""

    def __post_init__(self) -> None:
        if not self.label:
            self.label = EDGE_LABELS.get(self.type, self.type)


@dataclass
class GraphState:
    circles: List[CircleNode] = field(default_factory=list)
    people: List[PersonNode] = field(default_factory=list)
    edges: List[GraphEdge] = field(default_factory=list)
