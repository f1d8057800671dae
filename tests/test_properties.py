"""Tests for the total property readers."""

import pytest

from org_graph.properties import extract_relation_ids, extract_select, extract_text, get_property


class TestExtractText:
    def test_title_segments_are_concatenated(self):
        prop = {"type": "title", "title": [{"plain_text": "Soil "}, {"plain_text": "Team"}]}
        assert extract_text(prop) == "Soil Team"

    def test_rich_text(self):
        prop = {"type": "rich_text", "rich_text": [{"plain_text": "Grow food"}]}
        assert extract_text(prop) == "Grow food"

    def test_empty_segments(self):
        assert extract_text({"type": "title", "title": []}) == ""

    def test_tag_mismatch(self):
        # the payload key must match the declared tag
        assert extract_text({"type": "title", "rich_text": [{"plain_text": "x"}]}) == ""

    @pytest.mark.parametrize(
        "prop",
        [None, "text", 42, {}, {"type": "select", "select": {"name": "A"}}, {"type": "title", "title": None}],
    )
    def test_malformed_values_degrade_to_empty(self, prop):
        assert extract_text(prop) == ""

    def test_segments_without_plain_text(self):
        prop = {"type": "title", "title": [{"plain_text": "A"}, {"href": None}, "junk"]}
        assert extract_text(prop) == "A"


class TestExtractRelationIds:
    def test_ordered_ids(self):
        prop = {"type": "relation", "relation": [{"id": "b"}, {"id": "a"}]}
        assert extract_relation_ids(prop) == ["b", "a"]

    @pytest.mark.parametrize(
        "prop",
        [None, {}, {"type": "title", "title": []}, {"type": "relation", "relation": None}],
    )
    def test_non_relation_is_empty(self, prop):
        assert extract_relation_ids(prop) == []

    def test_items_without_id_are_dropped(self):
        prop = {"type": "relation", "relation": [{"id": "a"}, {}, "b"]}
        assert extract_relation_ids(prop) == ["a"]


class TestExtractSelect:
    def test_option_name(self):
        assert extract_select({"type": "select", "select": {"name": "Paused"}}) == "Paused"

    def test_empty_select_is_none(self):
        assert extract_select({"type": "select", "select": None}) is None

    def test_no_default_applied(self):
        assert extract_select(None) is None
        assert extract_select({"type": "rich_text", "rich_text": []}) is None


def test_get_property_tolerates_missing_bags():
    assert get_property({"id": "x"}, "Name") is None
    assert get_property(None, "Name") is None
    assert get_property({"properties": {"Name": 1}}, "Name") == 1
