"""Unit tests for breadth-first tree lookups."""

from unittest.mock import MagicMock

from jsskit.data.lookup import (
    find_component,
    find_in_jss,
    get_field,
    has_field,
    has_name,
)


class TestFindInJss:
    """Test JSS item search."""

    def test_shallow_match_wins(self, rendering):
        """A direct child is found before a deeper item with the same name."""
        found = find_in_jss(rendering["fields"]["items"], has_name("Card"))

        assert found["fields"]["Title"]["value"] == "Direct card"

    def test_finds_nested_item(self, rendering):
        """Items below the first level are reachable."""
        items = rendering["fields"]["items"]
        items[1]["name"] = "Other"

        found = find_in_jss(items, has_name("Card"))

        assert found["fields"]["Title"]["value"] == "Nested card"

    def test_siblings_visited_before_descendants(self, rendering):
        """Every item on a level is checked before descending."""
        visited = []

        def record(item):
            visited.append(item["name"])
            return False

        find_in_jss(rendering["fields"]["items"], record)

        assert visited == ["Group", "Card", "Card"]

    def test_get_value_transforms_match(self, rendering):
        """get_value is applied to the matching item."""
        result = find_in_jss(
            rendering["fields"]["items"],
            has_name("Group"),
            lambda item: item["displayName"],
        )

        assert result == "Group"

    def test_miss_returns_none(self, rendering):
        """No match returns None."""
        get_value = MagicMock()

        assert find_in_jss(rendering["fields"]["items"], has_name("Nope"), get_value) is None
        get_value.assert_not_called()

    def test_empty_or_missing_roots(self):
        """No roots returns None without calling the predicate."""
        predicate = MagicMock(return_value=True)

        assert find_in_jss([], predicate) is None
        assert find_in_jss(None, predicate) is None
        predicate.assert_not_called()

    def test_none_roots_are_skipped(self):
        """None entries are ignored."""
        assert find_in_jss([None], has_name("x")) is None

    def test_malformed_entries_are_skipped(self):
        """Non-mapping items are skipped and the search continues."""
        roots = [{"name": "root", "fields": {"items": ["oops", 7, {"name": "target"}]}}]

        assert find_in_jss(roots, has_name("target")) == {"name": "target"}
        assert find_in_jss([{"fields": {"items": ["oops"]}}], has_name("zzz")) is None

    def test_items_without_fields(self):
        """Items lacking a field group are still matched but not expanded."""
        assert find_in_jss([{"name": "bare"}], has_name("bare")) == {"name": "bare"}
        assert find_in_jss([{"name": "bare"}], has_name("other")) is None

    def test_field_lookup_on_root(self, rendering):
        """A field on the root item is found first."""
        result = find_in_jss([rendering], has_field("Heading"), get_field("Heading"))

        assert result == {"fieldType": "Single-Line Text", "value": "Our cards"}

    def test_field_lookup_descends(self, rendering):
        """A field missing on the root is taken from the nearest descendant."""
        result = find_in_jss([rendering], has_field("Title"), get_field("Title"))

        assert result["value"] == "Group title"


class TestPredicates:
    """Test lookup predicates."""

    def test_has_field_requires_truthy_value(self):
        """Empty fields do not count as present."""
        assert has_field("A")({"fields": {"A": {"value": "x"}}})
        assert not has_field("A")({"fields": {"A": None}})
        assert not has_field("A")({"fields": {}})
        assert not has_field("A")({"name": "no fields"})


class TestFindComponent:
    """Test rendering search across placeholders."""

    def test_find_by_uid(self, layout_data):
        """Renderings are matched by uid."""
        placeholders = layout_data["sitecore"]["route"]["placeholders"]

        assert find_component(placeholders, "uid-footer")["componentName"] == "Footer"

    def test_find_by_component_name(self, layout_data):
        """Renderings are matched by component name."""
        placeholders = layout_data["sitecore"]["route"]["placeholders"]

        assert find_component(placeholders, "CardList")["uid"].startswith("b5a5c3a1")

    def test_find_by_partial_datasource(self, layout_data):
        """Renderings are matched by (part of) their datasource ID."""
        placeholders = layout_data["sitecore"]["route"]["placeholders"]

        assert find_component(placeholders, "11111111")["componentName"] == "Header"

    def test_find_in_nested_placeholder(self, layout_data):
        """Renderings inside a rendering's own placeholders are found."""
        placeholders = layout_data["sitecore"]["route"]["placeholders"]

        assert find_component(placeholders, "Navigation")["uid"] == "uid-nav"

    def test_top_level_found_before_nested(self):
        """A top-level rendering wins over a nested one with the same name."""
        placeholders = {
            "main": [
                {"uid": "outer", "componentName": "Wrapper", "placeholders": {
                    "inner": [{"uid": "nested", "componentName": "Promo"}],
                }},
            ],
            "side": [{"uid": "top", "componentName": "Promo"}],
        }

        assert find_component(placeholders, "Promo")["uid"] == "top"

    def test_miss_returns_none(self, layout_data):
        """Unknown identifiers return None."""
        placeholders = layout_data["sitecore"]["route"]["placeholders"]

        assert find_component(placeholders, "Missing") is None

    def test_missing_placeholders(self):
        """No placeholders returns None."""
        assert find_component(None, "Header") is None
