"""CLI command: selectorkit build -- assemble a selector from tokens."""

from __future__ import annotations

import sys
from typing import Callable

import click

from selectorkit.builder import SelectorBuilder, SelectorError, css_selector_builder

# kind=value token -> fragment method
_FRAGMENTS: dict[str, Callable[[SelectorBuilder, str], SelectorBuilder]] = {
    "element": SelectorBuilder.element,
    "id": SelectorBuilder.id,
    "class": SelectorBuilder.class_,
    "attr": SelectorBuilder.attr,
    "pseudo-class": SelectorBuilder.pseudo_class,
    "pseudo-element": SelectorBuilder.pseudo_element,
}


def build_from_tokens(tokens: list[str] | tuple[str, ...]) -> SelectorBuilder:
    """Build a selector from ``kind=value`` and combinator tokens.

    Raises ValueError for malformed token sequences and
    :class:`SelectorError` for ordering violations.
    """
    compounds: list[SelectorBuilder] = []
    combinators: list[str] = []
    current: SelectorBuilder | None = None

    for token in tokens:
        kind, sep, value = token.partition("=")
        if not sep:
            if current is None:
                raise ValueError(f"Combinator {token!r} has no selector on its left")
            compounds.append(current)
            combinators.append(token)
            current = None
            continue
        if kind not in _FRAGMENTS:
            raise ValueError(
                f"Unknown fragment kind {kind!r}; expected one of: "
                + ", ".join(_FRAGMENTS)
            )
        current = _FRAGMENTS[kind](current or SelectorBuilder(), value)

    if current is None:
        if combinators:
            raise ValueError(f"Combinator {combinators[-1]!r} has no selector on its right")
        raise ValueError("No selector fragments given")

    result = current
    for left, combinator in zip(reversed(compounds), reversed(combinators)):
        result = css_selector_builder.combine(left, combinator, result)
    return result


@click.command()
@click.argument("tokens", nargs=-1, required=True)
def build(tokens: tuple[str, ...]) -> None:
    """Build a CSS selector and print it.

    TOKENS are ``kind=value`` fragments (element, id, class, attr,
    pseudo-class, pseudo-element) in order. A token without ``=`` is a
    combinator joining the selectors on either side, for example:

        selectorkit build element=div id=main '~' element=table id=data
    """
    try:
        selector = build_from_tokens(tokens)
    except (SelectorError, ValueError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(selector.stringify())
