"""Stateless entry point that starts a new selector on every call."""

from __future__ import annotations

from selectorkit.builder.selector import SelectorBuilder, Stringifiable

__all__ = ["CssSelectorBuilder", "css_selector_builder"]


class CssSelectorBuilder:
    """Facade over :class:`SelectorBuilder`.

    Each method creates a fresh builder and delegates to it, so
    ``css_selector_builder.id("a")`` and ``css_selector_builder.id("b")``
    never interfere with each other.
    """

    def element(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().element(value)

    def id(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().id(value)

    def class_(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().class_(value)

    def attr(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().attr(value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().pseudo_class(value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().pseudo_element(value)

    def combine(
        self, left: Stringifiable, combinator: str, right: Stringifiable
    ) -> SelectorBuilder:
        return SelectorBuilder().combine(left, combinator, right)

    def stringify(self) -> str:
        return SelectorBuilder().stringify()


css_selector_builder = CssSelectorBuilder()
