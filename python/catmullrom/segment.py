r"""Cubic curves of a single Catmull-Rom segment.

A segment is given by four consecutive points :math:`p_0, p_1, p_2, p_3` and
defines a cubic curve from :math:`p_1` to :math:`p_2`. The curve is written for
each axis as a Hermite cubic over :math:`s \in [0, 1]`:

.. math::

    x(s) = x_1 H_0(s) + x_2 H_1(s) + \dot{x}_1 H_2(s) + \dot{x}_2 H_3(s)

with the Hermite basis

:math:`H_0(s) = 2 s^3 - 3 s^2 + 1`

:math:`H_1(s) = -2 s^3 + 3 s^2`

:math:`H_2(s) = s^3 - 2 s^2 + s`

:math:`H_3(s) = s^3 - s^2`

The tangents :math:`\dot{x}_1` and :math:`\dot{x}_2` come from finite
differences with the centripetal knot spacing, where the parameter distance
between two points is the square root of their distance.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import numpy.typing as npt
from numpy.polynomial import Polynomial

from catmullrom.geometry import (
    SPACING_TOLERANCE,
    fourth_root,
    guard_spacing,
    squared_distance,
)
from catmullrom.points import as_interpolants, as_points
from catmullrom.settings import DerivedCurves

SEGMENT_POINTS = 4
"""Number of points which define a single segment."""


def _as_segment(segment: npt.ArrayLike) -> npt.NDArray[np.float64]:
    """Convert input into a ``(4, D)`` array of segment points."""
    pts = as_points(segment, SEGMENT_POINTS)
    if pts.shape[0] != SEGMENT_POINTS:
        raise ValueError(
            f"A segment is defined by exactly {SEGMENT_POINTS} points, but "
            f"{pts.shape[0]} were given."
        )
    return pts


def centripetal_spacing(
    segment: npt.ArrayLike, tolerance: float = SPACING_TOLERANCE
) -> tuple[float, float, float]:
    r"""Compute parameter spacing between consecutive points of a segment.

    Parameters
    ----------
    segment : (4, D) array_like
        Four consecutive points.
    tolerance : float, default: 1e-4
        Spacing bellow which points are treated as coincident.

    Returns
    -------
    (float, float, float)
        Spacings :math:`\Delta t_0, \Delta t_1, \Delta t_2`, which are the fourth
        roots of the squared distances between consecutive points. All of them are
        positive.
    """
    p0, p1, p2, p3 = _as_segment(segment)
    return _spacing(p0, p1, p2, p3, tolerance)


def _spacing(
    p0: npt.NDArray[np.float64],
    p1: npt.NDArray[np.float64],
    p2: npt.NDArray[np.float64],
    p3: npt.NDArray[np.float64],
    tolerance: float,
) -> tuple[float, float, float]:
    """Compute guarded spacings for already validated points."""
    dt0 = fourth_root(squared_distance(p0, p1))
    dt1 = fourth_root(squared_distance(p1, p2))
    dt2 = fourth_root(squared_distance(p2, p3))
    return guard_spacing(dt0, dt1, dt2, tolerance)


def _hermite_coefficients(x0, x1, dx0, dx1) -> npt.NDArray[np.float64]:
    """Return power series coefficients of Hermite cubics, lowest power first."""
    return np.array(
        [
            x0,
            dx0,
            -3 * x0 + 3 * x1 - 2 * dx0 - dx1,
            2 * x0 - 2 * x1 + dx0 + dx1,
        ],
        np.float64,
    )


def _tangents(x0, x1, x2, x3, dt0: float, dt1: float, dt2: float):
    """Return tangents at the inner points, scaled for the parameter in [0, 1]."""
    t1 = (x1 - x0) / dt0 - (x2 - x0) / (dt0 + dt1) + (x2 - x1) / dt1
    t2 = (x2 - x1) / dt1 - (x3 - x1) / (dt1 + dt2) + (x3 - x2) / dt2
    return t1 * dt1, t2 * dt1


def hermite_cubic(x0: float, x1: float, dx0: float, dx1: float) -> Polynomial:
    r"""Create a cubic with prescribed values and derivatives at 0 and 1.

    Parameters
    ----------
    x0 : float
        Value at zero.
    x1 : float
        Value at one.
    dx0 : float
        Derivative at zero.
    dx1 : float
        Derivative at one.

    Returns
    -------
    Polynomial
        Cubic polynomial :math:`p` with :math:`p(0) = x_0`, :math:`p(1) = x_1`,
        :math:`p^\prime(0) = \dot{x}_0`, and :math:`p^\prime(1) = \dot{x}_1`.
    """
    return Polynomial(_hermite_coefficients(x0, x1, dx0, dx1))


def catmullrom_cubic(
    x0: float,
    x1: float,
    x2: float,
    x3: float,
    dt0: float,
    dt1: float,
    dt2: float,
) -> Polynomial:
    """Create a cubic for one axis of a segment.

    Parameters
    ----------
    x0, x1, x2, x3 : float
        Coordinates of the four segment points along the axis.
    dt0, dt1, dt2 : float
        Parameter spacing between consecutive points.

    Returns
    -------
    Polynomial
        Cubic over :math:`[0, 1]`, going from ``x1`` to ``x2``.
    """
    t1, t2 = _tangents(x0, x1, x2, x3, dt0, dt1, dt2)
    return hermite_cubic(x1, x2, t1, t2)


def _segment_coefficients(
    pts: npt.NDArray[np.float64], tolerance: float
) -> tuple[npt.NDArray[np.float64], tuple[float, float, float]]:
    """Compute coefficients of all axis cubics of a validated segment.

    Returns
    -------
    (4, D) array
        Coefficients of the cubics, with each column being one axis.
    (float, float, float)
        Spacings used for the tangents.
    """
    p0, p1, p2, p3 = pts
    dt = _spacing(p0, p1, p2, p3, tolerance)
    t1, t2 = _tangents(p0, p1, p2, p3, *dt)
    return _hermite_coefficients(p1, p2, t1, t2), dt


def _axis_polynomials(coeffs: npt.NDArray[np.float64]) -> tuple[Polynomial, ...]:
    """Make a polynomial from each column of a coefficient matrix."""
    return tuple(Polynomial(coeffs[:, i]) for i in range(coeffs.shape[1]))


def segment_polynomials(
    segment: npt.ArrayLike, tolerance: float = SPACING_TOLERANCE
) -> tuple[Polynomial, ...]:
    """Create cubics for each axis of a segment.

    Parameters
    ----------
    segment : (4, D) array_like
        Four consecutive points.
    tolerance : float, default: 1e-4
        Spacing bellow which points are treated as coincident.

    Returns
    -------
    tuple of ``D`` Polynomial
        Cubic for each axis, which is equal to the second point at zero and the
        third point at one.
    """
    coeffs, _ = _segment_coefficients(_as_segment(segment), tolerance)
    return _axis_polynomials(coeffs)


def _evaluate_segment(
    pts: npt.NDArray[np.float64],
    polys: tuple[Polynomial, ...],
    s: npt.NDArray[np.float64],
) -> npt.NDArray[np.float64]:
    """Sample cubics of a segment, copying the end points exactly."""
    out = np.empty((s.size, pts.shape[1]), np.float64)
    out[0, :] = pts[1]
    out[-1, :] = pts[2]
    inner = s[1:-1]
    for i, poly in enumerate(polys):
        out[1:-1, i] = poly(inner)
    return out


def interpolate_segment(
    segment: npt.ArrayLike,
    interpolants: npt.ArrayLike,
    tolerance: float = SPACING_TOLERANCE,
) -> npt.NDArray[np.float64]:
    """Interpolate points between the inner points of a segment.

    Parameters
    ----------
    segment : (4, D) array_like
        Four consecutive points.
    interpolants : (L,) array_like
        Values in :math:`[0, 1]` at which to sample the segment.
    tolerance : float, default: 1e-4
        Spacing bellow which points are treated as coincident.

    Returns
    -------
    (L, D) array
        Interpolated points. First row is exactly the second point of the segment
        and the last row is exactly the third one. Rows in between are the segment
        cubics evaluated at ``interpolants[1:-1]``.
    """
    pts = _as_segment(segment)
    s = as_interpolants(interpolants)
    coeffs, _ = _segment_coefficients(pts, tolerance)
    return _evaluate_segment(pts, _axis_polynomials(coeffs), s)


@dataclass(frozen=True)
class SegmentCurves:
    """Polynomials of a single segment.

    Parameters
    ----------
    polynomials : tuple of Polynomial
        Cubic of each axis.
    first_derivatives : tuple of Polynomial, optional
        First derivative of each axis cubic, if it was requested.
    second_derivatives : tuple of Polynomial, optional
        Second derivative of each axis cubic, if it was requested.
    integrals : tuple of Polynomial, optional
        Antiderivative of each axis cubic, which is zero at the start of the
        segment, if it was requested.
    """

    polynomials: tuple[Polynomial, ...]
    first_derivatives: tuple[Polynomial, ...] | None = None
    second_derivatives: tuple[Polynomial, ...] | None = None
    integrals: tuple[Polynomial, ...] | None = None

    @property
    def dimension(self) -> int:
        """Number of axes."""
        return len(self.polynomials)


def derive_curves(
    polys: tuple[Polynomial, ...], request: DerivedCurves
) -> SegmentCurves:
    """Compute requested derived polynomials from axis cubics."""
    d1 = tuple(p.deriv(1) for p in polys) if request.first_derivative else None
    d2 = tuple(p.deriv(2) for p in polys) if request.second_derivative else None
    i1 = tuple(p.integ(1) for p in polys) if request.integral else None
    return SegmentCurves(polys, d1, d2, i1)


def segment_curves(
    segment: npt.ArrayLike,
    request: DerivedCurves | None = None,
    tolerance: float = SPACING_TOLERANCE,
) -> SegmentCurves:
    """Create cubics of a segment, together with requested derived polynomials.

    Parameters
    ----------
    segment : (4, D) array_like
        Four consecutive points.
    request : DerivedCurves, optional
        Which derived polynomials to compute. If not given, only the cubics are
        computed.
    tolerance : float, default: 1e-4
        Spacing bellow which points are treated as coincident.

    Returns
    -------
    SegmentCurves
        Cubics of the segment. Derived polynomials which were not requested are
        ``None``.
    """
    if request is None:
        request = DerivedCurves()
    return derive_curves(segment_polynomials(segment, tolerance), request)
