"""Ordering and uniqueness rules for compound selectors.

Fragments of a compound selector must appear in category order
(element, id, class, attribute, pseudo-class, pseudo-element), and the
categories limited to one occurrence may not be repeated.
"""

from __future__ import annotations

import logging

from selectorkit.builder.errors import RepeatError, SequenceError
from selectorkit.model.category import CATEGORY_RULES, Category

__all__ = ["check_order"]

log = logging.getLogger(__name__)


def check_order(previous: Category | None, category: Category) -> None:
    """Check that *category* may follow *previous* in one compound selector.

    *previous* is ``None`` when nothing has been appended yet.

    Raises :class:`SequenceError` if *category* ranks below *previous*, or
    :class:`RepeatError` if it repeats a category limited to one occurrence.
    """
    last_rank = 0 if previous is None else int(previous)
    if last_rank > category:
        log.debug("Rejected %s after %s: out of order", category.name, previous.name)
        raise SequenceError(category, previous)
    if last_rank == category and CATEGORY_RULES[category].max_occurrences == 1:
        log.debug("Rejected %s: already present", category.name)
        raise RepeatError(category, previous)
