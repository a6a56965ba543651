"""Relations between convex, clockwise polygons: containment and overlap.

Convexity and winding are preconditions; neither is checked here (see
polygon.is_convex / polygon.is_clockwise).
"""
from .types import Vec2, Poly
from .segment import left, right, signed_dist
from .polygon import edges
from .constants import TOUCH_TOL

def vec_inside_convex_poly(u: Vec2, poly: Poly) -> bool:
    """True iff u is on or right of every edge of poly (boundary counts as inside)."""
    return not any(left(e, u) for e in edges(poly))

def _convex_polys_disjoint_one_way(a: Poly, b: Poly, touching: bool = False,
                                   tol: float = TOUCH_TOL) -> bool:
    """True if some edge of a has its line separating b from a's interior.

    Strict: no vertex of b lies right of the edge. With touching, every vertex
    of b must be more than tol to the left, so shared edges/vertices don't separate.
    """
    for e in edges(a):
        if touching:
            if all(signed_dist(e, v) > tol for v in b):
                return True
        elif not any(right(e, v) for v in b):
            return True
    return False

def convex_polys_overlap(a: Poly, b: Poly, touching: bool = False,
                         tol: float = TOUCH_TOL) -> bool:
    """True iff convex polygons a and b overlap (separating-axis test on their edges).

    By default polygons that only share an edge or a vertex do not overlap;
    pass touching=True to count contact within tol as overlap.
    """
    return (not _convex_polys_disjoint_one_way(a, b, touching, tol)
            and not _convex_polys_disjoint_one_way(b, a, touching, tol))
