"""Polygon edges, signed area, orientation queries and visibility edges.

Polygons are expected in clockwise order; with that winding the interior lies
to the right of every edge and area() is positive.
"""
import math
from typing import Callable
from .types import Vec2, Seg2, Poly
from .vector import sub, dot
from .segment import left, right
from .constants import COLLINEAR_TOL

EdgePredicate = Callable[[Seg2, Vec2], bool]

# ============================================================
# Edges
# ============================================================
def seg(poly: Poly, i: int) -> Seg2:
    """Directed edge from vertex i to vertex (i+1) mod n."""
    n = len(poly)
    return Seg2(poly[i % n], poly[(i+1) % n])

def edges(poly: Poly) -> list[Seg2]:
    """All edges in index order; the closing edge (last -> first) comes last."""
    return [seg(poly, i) for i in range(len(poly))]

# ============================================================
# Area / Orientation
# ============================================================
def area(poly: Poly) -> float:
    """Signed shoelace area. Positive for clockwise winding, negative for CCW."""
    n = len(poly); a = 0.0
    for i in range(n):
        j = (i+1)%n; a += poly[i].x*poly[j].y - poly[i].y*poly[j].x
    return a/-2

def area_of_pgram(v0: Vec2, v1: Vec2, v2: Vec2) -> float:
    """Signed area of the parallelogram spanned by v1->v0 and v1->v2.

    Twice the signed area of triangle (v0, v1, v2); zero when collinear.
    """
    ax = v0.x-v1.x; ay = v0.y-v1.y
    bx = v2.x-v1.x; by = v2.y-v1.y
    return ax*by - ay*bx

def is_collinear(v0: Vec2, v1: Vec2, v2: Vec2, tol: float = COLLINEAR_TOL) -> bool:
    return abs(area_of_pgram(v0, v1, v2)) <= tol

def is_clockwise(poly: Poly) -> bool:
    return area(poly) > 0

def is_convex(poly: Poly, tol: float = COLLINEAR_TOL) -> bool:
    """True if every vertex turns the same way and the boundary winds exactly once.

    Collinear vertices are ignored. The winding check rejects self-intersecting
    stars, whose turns all share a sign. Works for either winding. Polygons with
    fewer than 3 vertices are not convex.
    """
    n = len(poly)
    if n < 3:
        return False
    sign = 0; turning = 0.0
    for i in range(n):
        a = area_of_pgram(poly[i-1], poly[i], poly[(i+1)%n])
        e1 = sub(poly[i], poly[i-1]); e2 = sub(poly[(i+1)%n], poly[i])
        turning += math.atan2(e1.x*e2.y - e1.y*e2.x, dot(e1, e2))
        if abs(a) <= tol:
            continue
        s = 1 if a > 0 else -1
        if sign == 0:
            sign = s
        elif s != sign:
            return False
    # Total turning of a closed polygon is a whole number of revolutions
    return sign != 0 and round(abs(turning)/(2*math.pi)) == 1

# ============================================================
# Visibility
# ============================================================
def visibility(poly: Poly, u: Vec2, pred: EdgePredicate) -> list[Seg2]:
    """Edges e of poly with pred(e, u), in edge order."""
    return [e for e in edges(poly) if pred(e, u)]

def visible_exterior(poly: Poly, u: Vec2) -> list[Seg2]:
    """Edges of poly that might be visible from u, for u outside poly.

    A per-edge facing test only: occlusion by other edges is not considered.
    """
    return visibility(poly, u, left)

def visible_interior(poly: Poly, u: Vec2) -> list[Seg2]:
    """Edges of poly that might be visible from u, for u inside poly."""
    return visibility(poly, u, right)
