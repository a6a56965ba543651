"""Named numeric tolerances.

Appropriate tolerances depend on the scale of the input coordinates, so every
routine that uses one also accepts it as a keyword argument. Values below suit
unit-scale geometry.
"""

# Absolute length tolerance (coordinate units) for touch / collinear-overlap tests
TOUCH_TOL = 1e-5

# |area_of_pgram| at or below this counts as collinear
COLLINEAR_TOL = 1e-9

# |sin| of the angle between two lines at or below this counts as parallel
# (dimensionless, so it holds for any segment length)
PARALLEL_TOL = 1e-12
