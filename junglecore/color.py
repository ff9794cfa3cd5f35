"""Linear RGBA colour."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Iterator, Optional, Union

from junglecore.mathutil import clamp

_UNSET = object()


@dataclass(frozen=True, init=False, slots=True)
class LinearColor:
    """An RGBA colour with float components.

    With no arguments every component, alpha included, is zero. When a
    colour is given, alpha defaults to one.
    """

    r: float
    g: float
    b: float
    a: float

    WHITE: ClassVar[LinearColor]
    BLACK: ClassVar[LinearColor]
    RED: ClassVar[LinearColor]
    GREEN: ClassVar[LinearColor]
    BLUE: ClassVar[LinearColor]

    def __init__(self, r=_UNSET, g: float = 0.0, b: float = 0.0, a: Optional[float] = None):
        if r is _UNSET:
            r = 0.0
            default_alpha = 0.0
        else:
            default_alpha = 1.0
        object.__setattr__(self, "r", float(r))
        object.__setattr__(self, "g", float(g))
        object.__setattr__(self, "b", float(b))
        object.__setattr__(self, "a", default_alpha if a is None else float(a))

    @property
    def rgba(self) -> tuple[float, float, float, float]:
        return (self.r, self.g, self.b, self.a)

    def __iter__(self) -> Iterator[float]:
        return iter(self.rgba)

    def __add__(self, other: LinearColor) -> LinearColor:
        return LinearColor(self.r + other.r, self.g + other.g, self.b + other.b, self.a + other.a)

    def __sub__(self, other: LinearColor) -> LinearColor:
        return LinearColor(self.r - other.r, self.g - other.g, self.b - other.b, self.a - other.a)

    def __mul__(self, other: Union[float, LinearColor]) -> LinearColor:
        """Multiply component-wise by another colour, or scale by a number."""
        if isinstance(other, LinearColor):
            return LinearColor(self.r * other.r, self.g * other.g, self.b * other.b, self.a * other.a)
        return LinearColor(self.r * other, self.g * other, self.b * other, self.a * other)

    def __rmul__(self, scalar: float) -> LinearColor:
        return self * scalar

    def __truediv__(self, scalar: float) -> LinearColor:
        inv = 1.0 / scalar
        return LinearColor(self.r * inv, self.g * inv, self.b * inv, self.a * inv)

    def clamp(self, low: float = 0.0, high: float = 1.0) -> LinearColor:
        """Clamp every component, alpha included, into ``[low, high]``."""
        return LinearColor(
            clamp(self.r, low, high),
            clamp(self.g, low, high),
            clamp(self.b, low, high),
            clamp(self.a, low, high),
        )

    @staticmethod
    def lerp(a: LinearColor, b: LinearColor, alpha: float) -> LinearColor:
        """Interpolate between two colours, component by component."""
        return LinearColor(
            a.r + alpha * (b.r - a.r),
            a.g + alpha * (b.g - a.g),
            a.b + alpha * (b.b - a.b),
            a.a + alpha * (b.a - a.a),
        )


LinearColor.WHITE = LinearColor(1.0, 1.0, 1.0)
LinearColor.BLACK = LinearColor(0.0, 0.0, 0.0)
LinearColor.RED = LinearColor(1.0, 0.0, 0.0)
LinearColor.GREEN = LinearColor(0.0, 1.0, 0.0)
LinearColor.BLUE = LinearColor(0.0, 0.0, 1.0)