"""Conversion of caller data into point and interpolant arrays.

All functions which compute curves work on a ``(N, D)`` array of points and a
``(L,)`` array of interpolants. Functions here are the only place where other
containers (lists of tuples, named tuples, tuples of lists, ...) are accepted.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np
import numpy.typing as npt

from catmullrom._common import ensure_array
from catmullrom.errors import (
    DimensionMismatchError,
    InsufficientPointsError,
    InterpolantRangeError,
)

logger = logging.getLogger(__name__)

MINIMUM_POINTS = 4
"""Number of points needed for a single cubic segment."""


def _point_dimension(point: object) -> int:
    """Return number of coordinates of a single point."""
    if isinstance(point, np.ndarray):
        return int(point.size) if point.ndim == 1 else -1
    if isinstance(point, Sequence) and not isinstance(point, (str, bytes)):
        return len(point)
    raise TypeError(
        f"Points must be sequences of coordinates, not {type(point).__name__}."
    )


def as_points(
    points: npt.ArrayLike, minimum: int = MINIMUM_POINTS
) -> npt.NDArray[np.float64]:
    """Convert a sequence of points into a 2D array.

    Parameters
    ----------
    points : array_like
        Sequence of points. Each point may be any sequence of numbers, such as
        a list, a tuple, a named tuple or a 1D array. All points must have the
        same number of coordinates.
    minimum : int, default: 4
        Minimum number of points which must be given.

    Returns
    -------
    (N, D) array
        Array of points, where ``N`` is the number of points and ``D`` is their
        dimension.

    Raises
    ------
    InsufficientPointsError
        When fewer than ``minimum`` points are given.
    DimensionMismatchError
        When points do not all have the same number of coordinates.
    """
    if isinstance(points, np.ndarray) and points.ndim == 2:
        pts = ensure_array(points, np.float64)
    else:
        seq = list(points)  # type: ignore[arg-type]
        if seq:
            expected = _point_dimension(seq[0])
            for i, p in enumerate(seq[1:], start=1):
                got = _point_dimension(p)
                if got != expected:
                    raise DimensionMismatchError(i, expected, got)
        pts = np.array(seq, np.float64)

    if pts.shape[0] < minimum:
        raise InsufficientPointsError(pts.shape[0], minimum)
    if pts.ndim != 2:
        raise ValueError(
            f"Points must form a 2D array, instead they have {pts.ndim} dimensions."
        )
    if pts.shape[1] < 1:
        raise ValueError("Points must have at least one coordinate.")
    if not np.all(np.isfinite(pts)):
        raise ValueError("Points must have finite coordinates.")
    return pts


def as_interpolants(values: npt.ArrayLike) -> npt.NDArray[np.float64]:
    """Convert interpolant values into a 1D array.

    Parameters
    ----------
    values : array_like
        Values in the range :math:`[0, 1]` at which each segment is sampled. The
        first and the last are usually ``0.0`` and ``1.0``, since the first and
        last sample of a segment are always its inner points.

    Returns
    -------
    (L,) array
        Array of interpolant values.

    Raises
    ------
    InterpolantRangeError
        When the values are not 1D, there are fewer than two of them, or any of
        them is outside of :math:`[0, 1]`.
    """
    s = ensure_array(values, np.float64)
    if s.ndim != 1:
        raise InterpolantRangeError(
            f"Interpolants must be a 1D array, instead they have {s.ndim} dimensions."
        )
    if s.size < 2:
        raise InterpolantRangeError(
            f"At least two interpolants are required, but {s.size} were given."
        )
    bad = ~((s >= 0.0) & (s <= 1.0))
    if np.any(bad):
        raise InterpolantRangeError(
            f"Interpolants must be in range [0, 1], but value {s[bad][0]} at index "
            f"{int(np.argmax(bad))} is not."
        )
    if s[0] != 0.0 or s[-1] != 1.0:
        logger.debug(
            "Interpolants span [%g, %g], segment ends are still copied exactly.",
            s[0],
            s[-1],
        )
    return s


def uniform_interpolants(n: int) -> npt.NDArray[np.float64]:
    """Return equally spaced interpolants.

    Parameters
    ----------
    n : int
        Number of interpolants, including both ``0.0`` and ``1.0``.

    Returns
    -------
    (n,) array
        Equally spaced values from zero to one.
    """
    if n < 2:
        raise InterpolantRangeError(f"At least two interpolants are required (got {n}).")
    return np.linspace(0.0, 1.0, int(n))


def into_unit_interval(values: npt.ArrayLike) -> npt.NDArray[np.float64]:
    """Linearly map values onto the interval :math:`[0, 1]`.

    The smallest value is mapped to zero and the largest one to one. This can be
    used to turn some parameter values (times, arc lengths, ...) into
    interpolants.

    Parameters
    ----------
    values : array_like
        Values to map.

    Returns
    -------
    array
        Array with the same shape as ``values``.
    """
    v = np.array(values, np.float64)
    lo = np.min(v)
    hi = np.max(v)
    if not hi > lo:
        raise ValueError("Values can not be mapped to [0, 1] if they are all the same.")
    out = (v - lo) / (hi - lo)
    # Keep the endpoints exact.
    out[v == lo] = 0.0
    out[v == hi] = 1.0
    return out
