"""Typed readers for Notion page property values.

Every reader is total: absent, empty or malformed values degrade to a neutral
result instead of raising.
"""

from typing import Any, List, Mapping, Optional

TEXT_TYPES = ("title", "rich_text")


def _tagged(prop: Any, tag: str) -> Any:
    """Return the payload stored under ``tag`` when ``prop`` carries that tag."""
    if not isinstance(prop, Mapping) or prop.get("type") != tag:
        return None
    return prop.get(tag)


def extract_text(prop: Any) -> str:
    for tag in TEXT_TYPES:
        segments = _tagged(prop, tag)
        if isinstance(segments, list) and segments:
            return "".join(
                str(segment.get("plain_text") or "")
                for segment in segments
                if isinstance(segment, Mapping)
            )
    return ""


def extract_relation_ids(prop: Any) -> List[str]:
    relation = _tagged(prop, "relation")
    if not isinstance(relation, list):
        return []
    return [
        str(item["id"])
        for item in relation
        if isinstance(item, Mapping) and item.get("id")
    ]


def extract_select(prop: Any) -> Optional[str]:
    option = _tagged(prop, "select")
    if not isinstance(option, Mapping) or not option.get("name"):
        return None
    return str(option["name"])


def get_property(record: Any, name: str) -> Any:
    """Look up a named property of a raw record, tolerating missing bags."""
    if not isinstance(record, Mapping):
        return None
    properties = record.get("properties")
    if not isinstance(properties, Mapping):
        return None
    return properties.get(name)
