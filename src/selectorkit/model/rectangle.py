"""Rectangle value object."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Rectangle:
    width: int | float
    height: int | float

    def area(self) -> int | float:
        return self.width * self.height
