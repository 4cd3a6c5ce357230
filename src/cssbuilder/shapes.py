"""Plain value types used alongside the serialization helpers."""

from dataclasses import dataclass
from typing import Union

Number = Union[int, float]


@dataclass
class Rectangle:
    """
    Axis-aligned rectangle.

    Properties:
        width: Horizontal extent
        height: Vertical extent
    """

    width: Number
    height: Number

    def get_area(self) -> Number:
        return self.width * self.height
