"""JSON helpers: serialize any value, rebuild an instance from JSON.

:func:`from_json` passes the parsed values to the target class
positionally, in the order they appear in the document. The class's
constructor parameters must therefore be declared in the same order as
the serialized keys::

    @dataclass
    class Size:
        height: int
        width: int

    from_json(Size, '{"height":10,"width":20}')  # Size(height=10, width=20)
"""

from __future__ import annotations

import dataclasses
import json
from typing import Any, TypeVar

from selectorkit.config import SelectorkitConfig

__all__ = ["get_json", "from_json"]

T = TypeVar("T")

_COMPACT_SEPARATORS = (",", ":")


def _encode_object(obj: Any) -> Any:
    """Encode dataclasses and plain objects as a mapping of their fields."""
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    if hasattr(obj, "__dict__"):
        return vars(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def get_json(obj: Any, config: SelectorkitConfig | None = None) -> str:
    """Return the JSON representation of *obj*.

    Dataclass instances and objects with a ``__dict__`` are written as
    JSON objects of their fields.

    >>> get_json([1, 2, 3])
    '[1,2,3]'
    """
    config = config or SelectorkitConfig()
    return json.dumps(
        obj,
        separators=_COMPACT_SEPARATORS if config.json_compact else None,
        sort_keys=config.json_sort_keys,
        default=_encode_object,
    )


def _positional_args(data: Any) -> list[Any]:
    if isinstance(data, dict):
        return list(data.values())
    if isinstance(data, list):
        return data
    if isinstance(data, str):
        return list(data)
    return []


def from_json(cls: type[T], text: str) -> T:
    """Parse *text* and construct ``cls(*values)`` from the parsed values.

    Objects contribute their values in key order, arrays their items,
    strings their characters, and other scalars no arguments at all.
    Raises :class:`json.JSONDecodeError` on malformed input.
    """
    return cls(*_positional_args(json.loads(text)))
