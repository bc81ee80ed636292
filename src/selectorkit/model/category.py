"""Selector fragment categories and their rendering rules."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Category(IntEnum):
    """Kind of fragment inside a compound selector.

    The integer value is the rank: fragments must be appended in
    non-decreasing rank order.
    """

    ELEMENT = 1
    ID = 2
    CLASS = 3
    ATTRIBUTE = 4
    PSEUDO_CLASS = 5
    PSEUDO_ELEMENT = 6


@dataclass(frozen=True)
class CategoryRule:
    """How a category renders and how often it may occur."""

    prefix: str
    suffix: str = ""
    max_occurrences: int | None = None  # None = unlimited

    def render(self, value: str) -> str:
        return f"{self.prefix}{value}{self.suffix}"


CATEGORY_RULES: dict[Category, CategoryRule] = {
    Category.ELEMENT: CategoryRule(prefix="", max_occurrences=1),
    Category.ID: CategoryRule(prefix="#", max_occurrences=1),
    Category.CLASS: CategoryRule(prefix="."),
    Category.ATTRIBUTE: CategoryRule(prefix="[", suffix="]"),
    Category.PSEUDO_CLASS: CategoryRule(prefix=":"),
    Category.PSEUDO_ELEMENT: CategoryRule(prefix="::", max_occurrences=1),
}
