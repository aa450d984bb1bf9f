# exercise_menu/services/rectangle_service.py
"""
Rectangle area and stacking demos.

area(), area_from_struct() and area_from_method() are three spellings of the
same calculation and always agree.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..console import Console
from ..models import Rectangle


def area(width: float, height: float) -> float:
    return width * height


def area_from_struct(rect: Rectangle) -> float:
    return rect.height * rect.width


def area_from_method(rect: Rectangle) -> float:
    return rect.area()


def fit_verb(outer: Rectangle, inner: Rectangle) -> str:
    """Return "can" if inner fits strictly inside outer, else "cannot"."""
    return "can" if outer.can_hold(inner) else "cannot"


@dataclass
class RectangleService:
    """Console demos for the Rectangle model."""

    console: Console

    def run_area(self, width: float = 5.0, height: float = 7.0, side: float = 4.0) -> None:
        """Print the area of a width x height rectangle three ways, then a square's."""
        self.console.write(f"The area of the rectangle is {area(width, height)} square pixels.")

        rect = Rectangle(width=width, height=height)
        self.console.write(f"The area of the rectangle is {area_from_struct(rect)} square pixels.")
        self.console.write(f"The rectangle (in debug) looks like {rect!r}")
        self.console.write(f"The area of the rectangle by method is {area_from_method(rect)}")

        square = Rectangle.square(side)
        self.console.write(f"The area of the square is {square.area()}")

    def run_stacking(self) -> None:
        """Check whether r2 fits in r1 and r3 fits in r2."""
        r1 = Rectangle(width=10.0, height=5.0)
        r2 = Rectangle(width=3.0, height=1.0)
        r3 = Rectangle(width=6.0, height=5.0)

        self.console.write(f"Rectangle r2 ({r2!r}) {fit_verb(r1, r2)} fit inside rectangle r1 ({r1!r})")
        self.console.write(f"Rectangle r3 ({r3!r}) {fit_verb(r2, r3)} fit inside rectangle r2 ({r2!r})")
