"""Tests for selector categories and rendering rules."""

from selectorkit.model import CATEGORY_RULES, Category


class TestCategory:
    def test_ranks(self):
        assert [int(c) for c in Category] == [1, 2, 3, 4, 5, 6]

    def test_every_category_has_rule(self):
        assert set(CATEGORY_RULES) == set(Category)


class TestRender:
    def test_element_has_no_prefix(self):
        assert CATEGORY_RULES[Category.ELEMENT].render("div") == "div"

    def test_attribute_is_wrapped(self):
        assert CATEGORY_RULES[Category.ATTRIBUTE].render("lang|=en") == "[lang|=en]"

    def test_pseudo_element_prefix(self):
        assert CATEGORY_RULES[Category.PSEUDO_ELEMENT].render("marker") == "::marker"

    def test_single_occurrence_categories(self):
        single = {c for c, rule in CATEGORY_RULES.items() if rule.max_occurrences == 1}
        assert single == {Category.ELEMENT, Category.ID, Category.PSEUDO_ELEMENT}
