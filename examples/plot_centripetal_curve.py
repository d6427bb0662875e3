r"""
Centripetal Catmull-Rom Curve Through Points
============================================

.. currentmodule:: catmullrom

This example shows how :func:`interpolate` is used to draw a smooth curve through a
sequence of points. Each segment of the curve is defined by four consecutive points
and goes from the second to the third one. The parameter spacing between two points
is the square root of their distance, which is what makes the curve "centripetal".
"""  # noqa: D205, D400

import numpy as np
from catmullrom import CurveSettings, EndpointExtension, interpolate
from matplotlib import pyplot as plt

# %%
#
# Points
# ------
#
# The points are not evenly spaced on purpose. With a uniform parametrization,
# the short segment in the middle would produce a loop or a cusp.

pts = np.array(
    [
        (0.0, 0.0),
        (1.0, 2.0),
        (3.0, 3.0),
        (3.3, 2.8),
        (4.0, 1.0),
        (6.0, 0.0),
        (7.0, 2.0),
    ]
)

# %%
#
# Interpolation
# -------------
#
# Every segment is sampled at the same interpolants. By default the first and
# the last point only determine the tangents, so the curve goes from the second
# to the second to last point. With an end extension, a phantom point is added
# on each end, so the curve passes through all of them.

interpolants = np.linspace(0, 1, 16)

inner = interpolate(pts, interpolants)
full = interpolate(
    pts, interpolants, CurveSettings(extension=EndpointExtension.LINEAR)
)

fig, ax = plt.subplots()
ax.plot(full[:, 0], full[:, 1], label="Linear end extension")
ax.plot(inner[:, 0], inner[:, 1], linestyle="dashed", label="No end extension")
ax.scatter(pts[:, 0], pts[:, 1], color="red", label="Points")
ax.set(xlabel="$x$", ylabel="$y$", aspect="equal")
ax.legend()
ax.grid()
plt.show()

# %%
#
# Closed Curves
# -------------
#
# Closing the curve wraps the points around, so that the last segment goes back
# to the first point.

closed = interpolate(pts, interpolants, CurveSettings(closed=True))

fig, ax = plt.subplots()
ax.plot(closed[:, 0], closed[:, 1], label="Closed curve")
ax.scatter(pts[:, 0], pts[:, 1], color="red", label="Points")
ax.set(xlabel="$x$", ylabel="$y$", aspect="equal")
ax.legend()
ax.grid()
plt.show()
