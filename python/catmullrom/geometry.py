"""Small geometric helpers used to compute the spacing of segment knots."""

from __future__ import annotations

import logging

import numpy as np
import numpy.typing as npt

logger = logging.getLogger(__name__)

SPACING_TOLERANCE = 1e-4
"""Spacing below which two consecutive points are treated as coincident."""


def dot(a: npt.ArrayLike, b: npt.ArrayLike) -> float:
    """Return the sum of the per-axis products of two points."""
    return float(np.dot(np.asarray(a, np.float64), np.asarray(b, np.float64)))


def squared_distance(a: npt.ArrayLike, b: npt.ArrayLike) -> float:
    """Return the squared Euclidean distance between two points."""
    d = np.asarray(b, np.float64) - np.asarray(a, np.float64)
    return dot(d, d)


def fourth_root(x: float) -> float:
    r"""Return the fourth root of a non-negative number.

    Parameters
    ----------
    x : float
        Value to take the root of.

    Returns
    -------
    float
        Value :math:`y \ge 0`, such that :math:`y^4 = x`.
    """
    if x < 0:
        raise ValueError(f"Can not take the fourth root of a negative value {x}.")
    return float(np.sqrt(np.sqrt(x)))


def guard_spacing(
    dt0: float, dt1: float, dt2: float, tolerance: float = SPACING_TOLERANCE
) -> tuple[float, float, float]:
    """Replace spacings of coincident points with usable values.

    The middle spacing is replaced by one if it is too small, then the outer two
    take the value of the middle one if they are too small. This keeps the tangent
    computation free of division by zero for repeated points.

    Parameters
    ----------
    dt0 : float
        Spacing between the first and the second point.
    dt1 : float
        Spacing between the second and the third point.
    dt2 : float
        Spacing between the third and the fourth point.
    tolerance : float, default: 1e-4
        Spacings below this value are replaced.

    Returns
    -------
    (float, float, float)
        Spacings, all of which are strictly positive.
    """
    if dt1 < tolerance:
        logger.debug("Middle spacing %g is degenerate, using 1.0 instead.", dt1)
        dt1 = 1.0
    if dt0 < tolerance:
        logger.debug("First spacing %g is degenerate, using %g instead.", dt0, dt1)
        dt0 = dt1
    if dt2 < tolerance:
        logger.debug("Last spacing %g is degenerate, using %g instead.", dt2, dt1)
        dt2 = dt1
    return dt0, dt1, dt2
