"""Phantom points which let a curve pass through the ends of a point sequence."""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from catmullrom.settings import CurveSettings, EndpointExtension


def _phantom(
    a: npt.NDArray[np.float64],
    b: npt.NDArray[np.float64],
    c: npt.NDArray[np.float64],
    extension: EndpointExtension,
) -> npt.NDArray[np.float64]:
    """Extrapolate a point before ``a``, where ``b`` and ``c`` follow ``a``."""
    if extension == EndpointExtension.LINEAR:
        return 2 * a - b
    if extension == EndpointExtension.QUADRATIC:
        return 3 * a - 3 * b + c
    raise ValueError(f"Extension {extension} does not add any points.")


def extend_points(
    points: npt.NDArray[np.float64], settings: CurveSettings
) -> npt.NDArray[np.float64]:
    """Return points with phantom points added as the settings require.

    Parameters
    ----------
    points : (N, D) array
        Points of the curve.
    settings : CurveSettings
        Settings which determine whether the curve is closed and how its ends are
        treated.

    Returns
    -------
    (M, D) array
        Points to split into segments. For an open curve with
        ``EndpointExtension.OMIT`` this is ``points`` itself. For other
        extensions it has one more point on each end, and for a closed curve the
        last point is put in front and the first two points are appended.
    """
    if settings.closed:
        return np.concatenate((points[-1:], points, points[:2]), axis=0)
    if settings.extension == EndpointExtension.OMIT:
        return points
    first = _phantom(points[0], points[1], points[2], settings.extension)
    last = _phantom(points[-1], points[-2], points[-3], settings.extension)
    return np.concatenate((first[None, :], points, last[None, :]), axis=0)
