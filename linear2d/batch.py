"""numpy-vectorized forms of the orientation and containment predicates.

Each function gives, element for element, the same answer as its scalar
counterpart in segment.py / convex.py / polygon.py, for callers testing many
points at once.
"""
from typing import Iterable

import numpy as np

from .types import Seg2, Poly
from .segment import ray


def as_array(points) -> np.ndarray:
    """Stack points into an (N, 2) float64 array.

    Parameters
    ----------
    points : Poly, iterable of Vec2 / (x, y) pairs, or (N, 2) array
    """
    if isinstance(points, np.ndarray):
        pts = points.astype(np.float64, copy=False)
    else:
        pts = np.asarray([tuple(p) for p in points], dtype=np.float64)
    return pts.reshape(-1, 2)


def side_values(seg: Seg2, points) -> np.ndarray:
    """Unnormalized side of each point: > 0 left of seg, < 0 right, 0 on its line."""
    pts = as_array(points)
    r = ray(seg)
    return -r.y * (pts[:, 0] - seg.p.x) + r.x * (pts[:, 1] - seg.p.y)


def left_mask(seg: Seg2, points) -> np.ndarray:
    return side_values(seg, points) > 0


def right_mask(seg: Seg2, points) -> np.ndarray:
    return side_values(seg, points) < 0


def inside_convex_poly_mask(points, poly: Poly) -> np.ndarray:
    """Boolean mask of points on or inside a convex, clockwise polygon.

    Parameters
    ----------
    points : (N, 2) points to test
    poly : convex polygon in clockwise order

    Returns
    -------
    mask : (N,) bool array, True where the point is left of no edge
    """
    pts = as_array(points)
    v = as_array(poly)
    if len(v) == 0:
        return np.ones(len(pts), dtype=bool)
    r = np.roll(v, -1, axis=0) - v
    # (N, M): side of point n relative to edge m
    side = (-r[:, 1])[None, :] * (pts[:, 0][:, None] - v[:, 0][None, :]) \
        + r[:, 0][None, :] * (pts[:, 1][:, None] - v[:, 1][None, :])
    return ~np.any(side > 0, axis=1)


def poly_areas(polys: Iterable[Poly]) -> np.ndarray:
    """Signed areas (clockwise positive) of several polygons.

    Polygons may have different vertex counts. Each is closed by repeating its
    first vertex out to the longest length, which adds no area, and the
    shoelace sums run over the padded (P, M+1, 2) stack at once.

    Returns
    -------
    areas : (P,) float64 array; empty polygons have area 0
    """
    verts = [as_array(poly) for poly in polys]
    if not verts:
        return np.zeros(0, dtype=np.float64)
    m = max(len(v) for v in verts)
    stack = np.zeros((len(verts), m + 1, 2), dtype=np.float64)
    for i, v in enumerate(verts):
        if len(v):
            stack[i, :len(v)] = v
            stack[i, len(v):] = v[0]
    x = stack[:, :, 0]
    y = stack[:, :, 1]
    return (x[:, :-1] * y[:, 1:] - y[:, :-1] * x[:, 1:]).sum(axis=1) / -2
