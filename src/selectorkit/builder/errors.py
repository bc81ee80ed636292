"""Selector builder error types."""

from __future__ import annotations

from selectorkit.model.category import Category


class SelectorError(Exception):
    """Base class for selector construction errors."""

    message = "Invalid selector"

    def __init__(
        self, category: Category, previous: Category | None = None
    ) -> None:
        self.category = category
        self.previous = previous
        super().__init__(self.message)


class SequenceError(SelectorError):
    """Raised when a fragment arrives after a higher-ranked one."""

    message = (
        "Selector parts should be arranged in the following order: "
        "element, id, class, attribute, pseudo-class, pseudo-element"
    )


class RepeatError(SelectorError):
    """Raised when element, id or pseudo-element is appended twice."""

    message = (
        "Element, id and pseudo-element should not occur more then one time "
        "inside the selector"
    )
