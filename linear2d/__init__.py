"""2D geometry primitives: vectors, directed segments and polygons."""
import logging

from .types import Vec2, Seg2, Poly
from .constants import TOUCH_TOL, COLLINEAR_TOL, PARALLEL_TOL
from .vector import (
    GeometryError,
    add, sub, dot, cross, scale, mag2, mag, norm, angle,
    rotate, rotate_around,
)
from .segment import (
    make_seg2, ray, length, left, right, signed_dist,
    isect, rel_isect, does_isect, does_isect_or_touch,
    dist_from_origin, dist_to_line,
)
from .polygon import (
    seg, edges, area, area_of_pgram,
    is_collinear, is_clockwise, is_convex,
    visibility, visible_exterior, visible_interior,
)
from .convex import vec_inside_convex_poly, convex_polys_overlap

logging.getLogger(__name__).addHandler(logging.NullHandler())
