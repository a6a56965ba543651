"""Shared polygon fixtures for linear2d tests."""
import pytest
from linear2d import Poly


@pytest.fixture(scope="session")
def square():
    """Unit square, clockwise."""
    return Poly([(0, 0), (0, 1), (1, 1), (1, 0)])


@pytest.fixture(scope="session")
def dart():
    """Non-convex arrowhead, clockwise."""
    return Poly([(0, 0), (-1, 2), (0, 1), (1, 2)])


@pytest.fixture(scope="session")
def overlap_polys():
    """Convex clockwise polygons with known relations.

    p0 contains p1, p2 and p3; p1 is disjoint from everything else;
    p2 and p3 share an edge; p3 and p4 share a vertex; p4 and p5 intersect.
    """
    return {
        "p0": Poly([(0, 0), (0, 10), (10, 10), (10, 0)]),
        "p1": Poly([(1, 7), (1, 9), (3, 9), (3, 7)]),
        "p2": Poly([(1, 3), (1, 5), (3, 5), (3, 3)]),
        "p3": Poly([(3, 3), (3, 5), (5, 5), (5, 3)]),
        "p4": Poly([(5, 5), (5, 6), (6, 6)]),
        "p5": Poly([(5, 1), (6, 10), (7, 2)]),
    }
