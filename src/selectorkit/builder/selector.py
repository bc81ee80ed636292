"""Fluent builder for CSS selector strings."""

from __future__ import annotations

import logging
from typing import Protocol

from selectorkit.builder.rules import check_order
from selectorkit.model.category import CATEGORY_RULES, Category

__all__ = ["SelectorBuilder", "Stringifiable"]

log = logging.getLogger(__name__)


class Stringifiable(Protocol):
    """Anything that can render itself as a selector string."""

    def stringify(self) -> str: ...


class SelectorBuilder:
    """Accumulates the fragments of a selector in category order.

    Every fragment method mutates the builder and returns it, so calls
    chain::

        SelectorBuilder().element("a").attr('href$=".png"').pseudo_class("focus")

    A builder that raised :class:`~selectorkit.builder.errors.SelectorError`
    must not be used further.
    """

    def __init__(self) -> None:
        self._text = ""
        self._last: Category | None = None

    @property
    def last_category(self) -> Category | None:
        """The most recently appended category, or None."""
        return self._last

    def _append(self, category: Category, value: str) -> SelectorBuilder:
        check_order(self._last, category)
        self._last = category
        self._text += CATEGORY_RULES[category].render(value)
        log.debug("Appended %s %r -> %r", category.name, value, self._text)
        return self

    # --- fragments -----------------------------------------------------------

    def element(self, value: str) -> SelectorBuilder:
        return self._append(Category.ELEMENT, value)

    def id(self, value: str) -> SelectorBuilder:
        return self._append(Category.ID, value)

    def class_(self, value: str) -> SelectorBuilder:
        return self._append(Category.CLASS, value)

    def attr(self, value: str) -> SelectorBuilder:
        """Append ``[value]``; *value* is inserted verbatim."""
        return self._append(Category.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self._append(Category.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self._append(Category.PSEUDO_ELEMENT, value)

    # --- composition ---------------------------------------------------------

    def combine(
        self, left: Stringifiable, combinator: str, right: Stringifiable
    ) -> SelectorBuilder:
        """Replace this builder's text with ``"<left> <combinator> <right>"``.

        Both sides are rendered with their own ``stringify()`` and are not
        modified. The combinator is not validated.
        """
        self._text = f"{left.stringify()} {combinator} {right.stringify()}"
        log.debug("Combined with %r -> %r", combinator, self._text)
        return self

    def stringify(self) -> str:
        return self._text

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"SelectorBuilder({self._text!r})"
