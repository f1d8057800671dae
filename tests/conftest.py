from typing import Any, Dict, List, Optional

import pytest


def title(text: str) -> Dict[str, Any]:
    return {"type": "title", "title": [{"plain_text": text}] if text else []}


def rich_text(text: str) -> Dict[str, Any]:
    return {"type": "rich_text", "rich_text": [{"plain_text": text}] if text else []}


def select(name: Optional[str]) -> Dict[str, Any]:
    return {"type": "select", "select": {"name": name} if name else None}


def relation(ids: List[str]) -> Dict[str, Any]:
    return {"type": "relation", "relation": [{"id": ref} for ref in ids]}


def circle_record(
    source_id: str,
    name: str,
    parents: Optional[List[str]] = None,
    leads: Optional[List[str]] = None,
    reps: Optional[List[str]] = None,
    purpose: str = "",
    status: Optional[str] = None,
) -> Dict[str, Any]:
    return {
        "id": source_id,
        "properties": {
            "Name": title(name),
            "Purpose": rich_text(purpose),
            "Status": select(status),
            "Super-circle": relation(parents or []),
            "Circle Lead": relation(leads or []),
            "Circle Rep": relation(reps or []),
        },
    }


def person_record(
    source_id: str,
    name: str,
    first_name: str = "",
    memberships: Optional[List[str]] = None,
    roles: Optional[List[str]] = None,
    status: Optional[str] = None,
) -> Dict[str, Any]:
    return {
        "id": source_id,
        "properties": {
            "Name": title(name),
            "First Name": rich_text(first_name),
            "Person Status": select(status),
            "Circle Memberships": relation(memberships or []),
            "Roles": relation(roles or []),
        },
    }


@pytest.fixture
def make_circle():
    return circle_record


@pytest.fixture
def make_person():
    return person_record


@pytest.fixture
def farm_records():
    """Root circle with a sub-circle and a nested sub-sub-circle, plus three people."""
    circles = [
        circle_record("aaaa-0001", "Farm", leads=["role-lead-farm"], reps=["role-rep-farm"]),
        circle_record("aaaa-0002", "Circle [Name]"),
        circle_record("aaaa-0003", "Garden", parents=["aaaa-0001"], leads=["role-lead-garden"]),
        circle_record("aaaa-0004", "Orchard", parents=["aaaa-0003"], status="Paused"),
    ]
    people = [
        person_record(
            "pppp-0001",
            "Ana Silva",
            first_name="Ana",
            memberships=["aaaa-0001", "aaaa-0003"],
            roles=["role-lead-farm", "role-rep-farm"],
        ),
        person_record(
            "pppp-0002",
            "Bo Jensen",
            memberships=["aaaa-0003", "aaaa-0004", "aaaa-0002"],
            roles=["role-lead-garden"],
        ),
        person_record("pppp-0003", "Cy Okafor", first_name="Cy", memberships=["missing"]),
    ]
    return circles, people
