"""Tests for the public graph shape produced by the assembly phase."""

import re

from org_graph.graph_orchestrator import GraphOrchestrator
from org_graph.phases import AssemblyPhase
from org_graph.phases.assembly import utc_timestamp


def _orchestrator():
    orchestrator = GraphOrchestrator()
    orchestrator.add_circle(
        "2de36f74-3758-8122-ac4a-000b520202bf",
        "Farm",
        purpose="Grow",
        status="Active",
        level=0,
        super_circle_source_ids=[],
        lead_role_source_ids=["r"],
    )
    orchestrator.add_person("c2edc051-62cd", "Ana", full_name="Ana Silva", role_source_ids=["r"])
    return orchestrator


def test_nodes_are_stripped_to_public_fields():
    result = AssemblyPhase(clock=lambda: "T").run({"orchestrator": _orchestrator()})
    circle, person = result["graph"]["nodes"]
    assert circle == {
        "id": "circle-0",
        "name": "Farm",
        "fullName": "Farm",
        "purpose": "Grow",
        "status": "Active",
        "nodeType": "circle",
        "level": 0,
        "notionUrl": "https://notion.so/2de36f7437588122ac4a000b520202bf",
    }
    assert person == {
        "id": "person-0",
        "name": "Ana",
        "fullName": "Ana Silva",
        "purpose": "",
        "status": "Active",
        "nodeType": "person",
        "notionUrl": "https://notion.so/c2edc05162cd",
    }


def test_meta_counts_and_provenance():
    orchestrator = _orchestrator()
    orchestrator.add_person("p-2", "Bo")
    result = AssemblyPhase(source_label="fixture", clock=lambda: "2026-01-01T00:00:00.000Z").run(
        {"orchestrator": orchestrator}
    )
    assert result["graph"]["meta"] == {
        "circleCount": 1,
        "personCount": 2,
        "edgeCount": 0,
        "timestamp": "2026-01-01T00:00:00.000Z",
        "source": "fixture",
    }


def test_person_full_name_falls_back_to_name():
    orchestrator = GraphOrchestrator()
    orchestrator.add_person("p", "Bo")
    node = AssemblyPhase().run({"orchestrator": orchestrator})["graph"]["nodes"][0]
    assert node["fullName"] == "Bo"


def test_custom_page_url_base():
    phase = AssemblyPhase(page_url="https://www.notion.so/")
    assert phase.page_url("ab-cd-ef") == "https://www.notion.so/abcdef"


def test_timestamp_is_utc_iso():
    assert re.fullmatch(r"\d{4}-\d\d-\d\dT\d\d:\d\d:\d\d\.\d{3}Z", utc_timestamp())
