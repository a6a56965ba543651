"""Vector algebra on Vec2 values."""
import logging
import math
from .types import Vec2

log = logging.getLogger(__name__)

# ============================================================
# Error Type
# ============================================================
class GeometryError(ValueError):
    """Raised for degenerate input that would otherwise divide by zero."""

# ============================================================
# Arithmetic
# ============================================================
def add(u: Vec2, v: Vec2) -> Vec2:
    return Vec2(u.x+v.x, u.y+v.y)

def sub(u: Vec2, v: Vec2) -> Vec2:
    return Vec2(u.x-v.x, u.y-v.y)

def dot(u: Vec2, v: Vec2) -> float:
    return u.x*v.x + u.y*v.y

def cross(u: Vec2) -> Vec2:
    """Perpendicular of u, rotated 90 degrees CCW. The zero vector maps to itself."""
    return Vec2(-u.y, u.x)

def scale(u: Vec2, s: float) -> Vec2:
    return Vec2(u.x*s, u.y*s)

# ============================================================
# Magnitude / Direction
# ============================================================
def mag2(u: Vec2) -> float:
    """Squared magnitude; use instead of mag() when only comparing lengths."""
    return u.x*u.x + u.y*u.y

def mag(u: Vec2) -> float:
    return math.sqrt(mag2(u))

def norm(u: Vec2) -> Vec2:
    """Unit vector with the same angle as u. Raises GeometryError for the zero vector."""
    m = mag(u)
    if m == 0:
        log.debug("norm() called with zero vector")
        raise GeometryError("Zero vector has no direction")
    return Vec2(u.x/m, u.y/m)

def angle(u: Vec2) -> float:
    """Angle of u from the +x axis in radians, in (-pi, pi]."""
    return math.atan2(u.y, u.x)

# ============================================================
# Rotation
# ============================================================
def rotate(u: Vec2, theta: float) -> Vec2:
    """Rotate u about the origin by theta radians (CCW for positive theta)."""
    c = math.cos(theta); s = math.sin(theta)
    return Vec2(u.x*c - u.y*s, u.x*s + u.y*c)

def rotate_around(u: Vec2, pivot: Vec2, theta: float) -> Vec2:
    """Rotate u about pivot by theta radians."""
    return add(rotate(sub(u, pivot), theta), pivot)
