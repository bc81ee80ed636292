from selectorkit.builder.errors import RepeatError, SelectorError, SequenceError
from selectorkit.builder.facade import CssSelectorBuilder, css_selector_builder
from selectorkit.builder.rules import check_order
from selectorkit.builder.selector import SelectorBuilder, Stringifiable

__all__ = [
    "CssSelectorBuilder",
    "RepeatError",
    "SelectorBuilder",
    "SelectorError",
    "SequenceError",
    "Stringifiable",
    "check_order",
    "css_selector_builder",
]
