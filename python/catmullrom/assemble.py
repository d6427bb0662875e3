"""Interpolation of a curve through a sequence of points.

Points are split into overlapping windows of four consecutive points. Each
window gives one segment of the curve, which spans between its two inner
points. Samples of all segments are joined into a single array, where two
neighbouring segments share the row of their common point.
"""

from __future__ import annotations

import logging

import numpy as np
import numpy.typing as npt

from catmullrom._common import read_only
from catmullrom.errors import InsufficientPointsError
from catmullrom.extension import extend_points
from catmullrom.points import MINIMUM_POINTS, as_interpolants, as_points
from catmullrom.segment import (
    SEGMENT_POINTS,
    _axis_polynomials,
    _evaluate_segment,
    _segment_coefficients,
)
from catmullrom.settings import CurveSettings

logger = logging.getLogger(__name__)


def window_count(n_points: int) -> int:
    """Return number of segments made from a sequence of points.

    Parameters
    ----------
    n_points : int
        Number of points in the sequence.

    Returns
    -------
    int
        Number of windows of four consecutive points.
    """
    if n_points < SEGMENT_POINTS:
        raise InsufficientPointsError(n_points, SEGMENT_POINTS)
    return n_points - SEGMENT_POINTS + 1


def output_length(n_points: int, n_interpolants: int) -> int:
    """Return number of rows produced by interpolating a point sequence.

    Parameters
    ----------
    n_points : int
        Number of points in the sequence.
    n_interpolants : int
        Number of interpolants used for each segment.

    Returns
    -------
    int
        Number of interpolated points. Neighbouring segments share one point, so
        this is ``(n_points - 3) * (n_interpolants - 1) + 1``.
    """
    return window_count(n_points) * (n_interpolants - 1) + 1


def _interpolate_windows(
    pts: npt.NDArray[np.float64], s: npt.NDArray[np.float64], tolerance: float
) -> npt.NDArray[np.float64]:
    """Interpolate all windows of validated points."""
    n_windows = window_count(pts.shape[0])
    n_samples = s.size
    if n_windows == 1:
        coeffs, _ = _segment_coefficients(pts, tolerance)
        return _evaluate_segment(pts, _axis_polynomials(coeffs), s)

    out = np.empty((output_length(pts.shape[0], n_samples), pts.shape[1]), np.float64)
    logger.debug(
        "Interpolating %d windows with %d samples each into %d points.",
        n_windows,
        n_samples,
        out.shape[0],
    )
    stride = n_samples - 1
    for k in range(n_windows):
        window = pts[k : k + SEGMENT_POINTS]
        coeffs, _ = _segment_coefficients(window, tolerance)
        block = _evaluate_segment(window, _axis_polynomials(coeffs), s)
        # First row of the block is the same point as the last row of the previous.
        out[k * stride : k * stride + n_samples, :] = block
    return out


def interpolate(
    points: npt.ArrayLike,
    interpolants: npt.ArrayLike,
    settings: CurveSettings | None = None,
) -> npt.NDArray[np.float64]:
    """Interpolate a centripetal Catmull-Rom curve through points.

    Parameters
    ----------
    points : (N, D) array_like
        Sequence of at least four points. Each point can be any sequence of
        numbers, but all must have the same number of coordinates.
    interpolants : (L,) array_like
        Values in :math:`[0, 1]` at which each segment is sampled. Typically these
        start with ``0.0`` and end with ``1.0``.
    settings : CurveSettings, optional
        Settings of the curve. By default the curve is open and goes from the
        second to the second to last point.

    Returns
    -------
    ((N - 3) * (L - 1) + 1, D) array
        Read-only array of interpolated points. Input points which the curve
        passes through appear in it exactly. With end extensions or a closed
        curve, ``N`` is the number of points after phantom points are added.

    Raises
    ------
    InsufficientPointsError
        When fewer than four points are given.
    DimensionMismatchError
        When points do not all have the same dimension.
    InterpolantRangeError
        When interpolants are not valid.

    Examples
    --------
    Points on a line with the same spacing give a straight line back:

    >>> from catmullrom import interpolate
    >>> interpolate([(0, 0), (1, 0), (2, 0), (3, 0)], [0.0, 0.5, 1.0])
    array([[1. , 0. ],
           [1.5, 0. ],
           [2. , 0. ]])
    """
    if settings is None:
        settings = CurveSettings()
    pts = extend_points(as_points(points, MINIMUM_POINTS), settings)
    s = as_interpolants(interpolants)
    return read_only(_interpolate_windows(pts, s, settings.spacing_tolerance))
