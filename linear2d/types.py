"""Immutable value types: vectors, directed segments, polygons."""
from typing import Iterable, NamedTuple


class Vec2(NamedTuple):
    """2D vector / point. Arithmetic operators return new Vec2 values."""
    x: float; y: float

    def __add__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x+other[0], self.y+other[1])

    def __sub__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x-other[0], self.y-other[1])

    def __neg__(self) -> "Vec2":
        return Vec2(-self.x, -self.y)

    def __mul__(self, s: float) -> "Vec2":
        return Vec2(self.x*s, self.y*s)

    __rmul__ = __mul__


class Seg2(NamedTuple):
    """Directed segment from p to q. Reversing it flips every left/right test."""
    p: Vec2; q: Vec2


class Poly(tuple[Vec2, ...]):
    """Closed polygon; edges join consecutive vertices and wrap last -> first.

    Orientation predicates assume clockwise winding, which is not checked.
    Vertices may be given as Vec2 or any (x, y) pair.
    """
    __slots__ = ()

    def __new__(cls, verts: Iterable[tuple[float, float]]) -> "Poly":
        return super().__new__(cls, (Vec2(*v) for v in verts))

    def __repr__(self) -> str:
        return f"Poly({list(self)!r})"
