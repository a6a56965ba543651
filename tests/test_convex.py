"""Tests for linear2d/convex.py."""
import itertools
import pytest
from linear2d import Vec2, Poly, vec_inside_convex_poly, convex_polys_overlap
from linear2d.convex import _convex_polys_disjoint_one_way


# --- vec_inside_convex_poly ---

@pytest.mark.parametrize("u, expected", [
    (Vec2(0.5, 0.5), True),
    (Vec2(0, 0.5), True),    # on an edge
    (Vec2(1, 1), True),      # on a vertex
    (Vec2(1.5, 0.5), False),
    (Vec2(-0.001, 0.5), False),
    (Vec2(0.5, 2), False),
])
def test_vec_inside_square(square, u, expected):
    assert vec_inside_convex_poly(u, square) == expected


def test_vec_inside_triangle():
    tri = Poly([(5, 1), (6, 10), (7, 2)])
    assert vec_inside_convex_poly(Vec2(6, 5), tri)
    assert not vec_inside_convex_poly(Vec2(5, 5), tri)


# --- convex_polys_overlap ---

_EXPECTED = {
    ("p0", "p1"): True,
    ("p0", "p2"): True,
    ("p0", "p3"): True,
    ("p0", "p4"): True,
    ("p0", "p5"): True,
    ("p1", "p2"): False,
    ("p1", "p3"): False,
    ("p1", "p4"): False,
    ("p1", "p5"): False,
    ("p2", "p3"): False,   # shared edge
    ("p2", "p4"): False,
    ("p2", "p5"): False,
    ("p3", "p4"): False,   # shared vertex
    ("p3", "p5"): False,
    ("p4", "p5"): True,
}


class TestConvexPolysOverlap:
    @pytest.mark.parametrize("pair, expected", sorted(_EXPECTED.items()))
    def test_pairs(self, overlap_polys, pair, expected):
        a, b = overlap_polys[pair[0]], overlap_polys[pair[1]]
        assert convex_polys_overlap(a, b) == expected
        assert convex_polys_overlap(b, a) == expected

    def test_self_overlap(self, overlap_polys):
        for p in overlap_polys.values():
            assert convex_polys_overlap(p, p)

    def test_touching_counts_when_requested(self, overlap_polys):
        p = overlap_polys
        assert convex_polys_overlap(p["p2"], p["p3"], touching=True)
        assert convex_polys_overlap(p["p3"], p["p4"], touching=True)

    def test_gap_never_overlaps(self, overlap_polys):
        p = overlap_polys
        assert not convex_polys_overlap(p["p1"], p["p2"], touching=True)
        assert not convex_polys_overlap(p["p1"], p["p5"], touching=True)

    def test_touching_is_superset(self, overlap_polys):
        for a, b in itertools.product(overlap_polys.values(), repeat=2):
            if convex_polys_overlap(a, b):
                assert convex_polys_overlap(a, b, touching=True)


def test_squares_with_gap():
    a = Poly([(0, 0), (0, 1), (1, 1), (1, 0)])
    b = Poly([(2, 0), (2, 1), (3, 1), (3, 0)])
    assert not convex_polys_overlap(a, b)
    assert not convex_polys_overlap(a, b, touching=True)


def test_disjoint_one_way_finds_separating_edge(overlap_polys):
    p = overlap_polys
    assert _convex_polys_disjoint_one_way(p["p1"], p["p2"])
    assert not _convex_polys_disjoint_one_way(p["p0"], p["p1"])
    # Contained polygon: none of p1's edges separate p0
    assert not _convex_polys_disjoint_one_way(p["p1"], p["p0"])
