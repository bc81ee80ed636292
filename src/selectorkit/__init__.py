"""selectorkit - fluent CSS selector builder with ordering checks."""

from selectorkit.builder import (
    CssSelectorBuilder,
    RepeatError,
    SelectorBuilder,
    SelectorError,
    SequenceError,
    css_selector_builder,
)
from selectorkit.config import SelectorkitConfig
from selectorkit.model import Category, Rectangle
from selectorkit.serialization import from_json, get_json

__version__ = "0.1.0"

__all__ = [
    "Category",
    "CssSelectorBuilder",
    "Rectangle",
    "RepeatError",
    "SelectorBuilder",
    "SelectorError",
    "SelectorkitConfig",
    "SequenceError",
    "__version__",
    "css_selector_builder",
    "from_json",
    "get_json",
]
