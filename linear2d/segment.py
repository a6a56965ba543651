"""Directed segment geometry: orientation, line intersection, distances."""
import logging
from .types import Vec2, Seg2
from .vector import GeometryError, add, sub, dot, cross, scale, mag, mag2
from .constants import TOUCH_TOL, PARALLEL_TOL

log = logging.getLogger(__name__)

_ORIGIN = Vec2(0.0, 0.0)

def make_seg2(x1: float, y1: float, x2: float, y2: float) -> Seg2:
    """Segment from (x1, y1) to (x2, y2)."""
    return Seg2(Vec2(x1, y1), Vec2(x2, y2))

def ray(seg: Seg2) -> Vec2:
    """Direction vector p -> q of the segment."""
    return sub(seg.q, seg.p)

def length(seg: Seg2) -> float:
    return mag(ray(seg))

def _require_length(seg: Seg2) -> None:
    if mag2(ray(seg)) == 0:
        log.debug("zero-length segment %r", seg)
        raise GeometryError(f"Zero-length segment at ({seg.p.x}, {seg.p.y})")

# ============================================================
# Orientation
# ============================================================
def _side(seg: Seg2, u: Vec2) -> float:
    """Positive left of seg, negative right, zero on its line. Scales with |ray(seg)|."""
    return dot(cross(ray(seg)), sub(u, seg.p))

def left(seg: Seg2, u: Vec2) -> bool:
    """True iff u lies strictly left of the directed line through seg."""
    return _side(seg, u) > 0

def right(seg: Seg2, u: Vec2) -> bool:
    """True iff u lies strictly right of the directed line through seg."""
    return _side(seg, u) < 0

# ============================================================
# Line Intersection
# ============================================================
def rel_isect(a: Seg2, b: Seg2, tol: float = PARALLEL_TOL) -> float:
    """Parameter t along a where the lines through a and b cross.

    The crossing point is a.p + t*ray(a); t in [0, 1] means it lies within a.
    Raises GeometryError if the lines are parallel, i.e. the sine of the angle
    between them is at most tol, or if either segment has zero length.
    """
    by = b.q.y-b.p.y; bx = b.p.x-b.q.x
    n = (b.p.x-a.p.x)*by + (b.p.y-a.p.y)*bx
    d = (a.q.x-a.p.x)*by + (a.q.y-a.p.y)*bx
    if abs(d) <= tol*length(a)*length(b):
        log.debug("parallel lines %r and %r (det=%.3e)", a, b, d)
        raise GeometryError(f"Parallel lines: det={d:.2e}")
    return n/d

def isect(a: Seg2, b: Seg2, tol: float = PARALLEL_TOL) -> Vec2:
    """Intersection point of the infinite lines through a and b.

    Raises GeometryError if the lines are parallel.
    """
    return add(a.p, scale(ray(a), rel_isect(a, b, tol)))

# ============================================================
# Bounded Segment Intersection
# ============================================================
def _opposite_strict(seg: Seg2, other: Seg2) -> bool:
    sp = _side(seg, other.p); sq = _side(seg, other.q)
    return (sp > 0 and sq < 0) or (sp < 0 and sq > 0)

def does_isect(a: Seg2, b: Seg2) -> bool:
    """True iff segments a and b properly cross.

    Each segment's endpoints must lie strictly on opposite sides of the other's
    line, so touching at an endpoint, T-junctions and collinear overlap are
    all False.
    """
    return _opposite_strict(b, a) and _opposite_strict(a, b)

def signed_dist(seg: Seg2, u: Vec2) -> float:
    """Signed perpendicular distance of u from the line through seg (left positive).

    Raises GeometryError if seg has zero length.
    """
    _require_length(seg)
    return _side(seg, u)/length(seg)

def _collinear_overlap(a: Seg2, b: Seg2, tol: float) -> bool:
    """1D overlap of b's projection onto a with [0, |a|], within tol."""
    r = ray(a); L = mag(r)
    t0 = dot(sub(b.p, a.p), r)/L; t1 = dot(sub(b.q, a.p), r)/L
    return min(t0, t1) <= L + tol and max(t0, t1) >= -tol

def does_isect_or_touch(a: Seg2, b: Seg2, tol: float = TOUCH_TOL) -> bool:
    """True iff segments a and b cross, touch, or overlap collinearly.

    An endpoint within tol (absolute distance) of the other segment's line
    counts as lying on it. Every pair accepted by does_isect() is accepted here.
    Raises GeometryError if either segment has zero length.
    """
    da = (signed_dist(b, a.p), signed_dist(b, a.q))
    db = (signed_dist(a, b.p), signed_dist(a, b.q))
    if all(abs(d) <= tol for d in da + db):
        return _collinear_overlap(a, b, tol)
    def straddles(d1: float, d2: float) -> bool:
        return not (d1 > tol and d2 > tol) and not (d1 < -tol and d2 < -tol)
    return straddles(*da) and straddles(*db)

# ============================================================
# Distances
# ============================================================
def dist_from_origin(seg: Seg2, tol: float = PARALLEL_TOL) -> float:
    """Perpendicular distance from the origin to the line through seg."""
    _require_length(seg)
    perp = Seg2(cross(ray(seg)), _ORIGIN)
    return mag(isect(perp, seg, tol))

def dist_to_line(u: Vec2, seg: Seg2, tol: float = PARALLEL_TOL) -> float:
    """Perpendicular distance from u to the infinite line through seg."""
    _require_length(seg)
    perp = Seg2(u, add(u, cross(ray(seg))))
    return mag(sub(isect(perp, seg, tol), u))
