from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SelectorkitConfig:
    json_compact: bool = True  # "," and ":" separators, no spaces
    json_sort_keys: bool = False
    log_level: str = "WARNING"
