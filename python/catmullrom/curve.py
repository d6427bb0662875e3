"""Functions and classes dedicated to interpolation of curves."""

from __future__ import annotations

import numpy as np
import numpy.typing as npt
from numpy.polynomial import polynomial as npp

from catmullrom._common import read_only
from catmullrom.assemble import _interpolate_windows, window_count
from catmullrom.extension import extend_points
from catmullrom.points import MINIMUM_POINTS, as_interpolants, as_points
from catmullrom.segment import (
    SEGMENT_POINTS,
    SegmentCurves,
    _axis_polynomials,
    _segment_coefficients,
    derive_curves,
)
from catmullrom.settings import CurveSettings, DerivedCurves


class CatmullRomCurve:
    r"""Centripetal Catmull-Rom curve through a sequence of points.

    The curve is made of segments, one for each window of four consecutive
    points. It is parametrized by :math:`u \in [0, n]`, where :math:`n` is the
    number of segments, so that the integer part of :math:`u` selects the
    segment and the fractional part is the local parameter of that segment.

    Parameters
    ----------
    points : (N, D) array_like
        Sequence of at least four points.
    settings : CurveSettings, optional
        Settings of the curve. If not given, the curve is open and the first and
        the last points are only used to compute tangents.

    Examples
    --------
    .. jupyter-execute::

        >>> import numpy as np
        >>> from matplotlib import pyplot as plt
        >>> from catmullrom import CatmullRomCurve, CurveSettings, EndpointExtension
        >>>
        >>> pts = np.array([(0, 0), (1, 2), (3, 3), (4, 1), (6, 0), (7, 2)])
        >>> curve = CatmullRomCurve(
        ...     pts, CurveSettings(extension=EndpointExtension.LINEAR)
        ... )
        >>> u = np.linspace(0, curve.n_segments, 200)
        >>> xy = curve(u)
        >>> plt.figure()
        >>> plt.plot(xy[:, 0], xy[:, 1], label="curve")
        >>> plt.scatter(pts[:, 0], pts[:, 1], color="red", label="points")
        >>> plt.legend()
        >>> plt.grid()
        >>> plt.show()
    """

    settings: CurveSettings
    _points: npt.NDArray[np.float64]
    _spacings: npt.NDArray[np.float64]
    _coefficients: npt.NDArray[np.float64]

    def __init__(
        self, points: npt.ArrayLike, settings: CurveSettings | None = None
    ) -> None:
        if settings is None:
            settings = CurveSettings()
        self.settings = settings
        pts = extend_points(as_points(points, MINIMUM_POINTS), settings)
        n = window_count(pts.shape[0])
        coeffs = np.empty((n, 4, pts.shape[1]), np.float64)
        spacings = np.empty((n, 3), np.float64)
        for k in range(n):
            coeffs[k], spacings[k] = _segment_coefficients(
                pts[k : k + SEGMENT_POINTS], settings.spacing_tolerance
            )
        self._points = read_only(np.array(pts, np.float64))
        self._spacings = read_only(spacings)
        self._coefficients = read_only(coeffs)

    @property
    def n_segments(self) -> int:
        """Number of segments in the curve."""
        return int(self._coefficients.shape[0])

    @property
    def dimension(self) -> int:
        """Number of coordinates of each point."""
        return int(self._coefficients.shape[2])

    @property
    def points(self) -> npt.NDArray[np.float64]:
        """Points the segments are made from, including any phantom points."""
        return self._points

    @property
    def spacings(self) -> npt.NDArray[np.float64]:
        """Centripetal spacings of each segment's points as ``(n_segments, 3)``."""
        return self._spacings

    @property
    def coefficients(self) -> npt.NDArray[np.float64]:
        """Cubic coefficients as ``(n_segments, 4, D)``, lowest power first."""
        return self._coefficients

    def _locate(
        self, u: npt.ArrayLike
    ) -> tuple[npt.NDArray[np.uint64], npt.NDArray[np.float64], tuple[int, ...]]:
        """Split global parameters into segment indices and local parameters."""
        t = np.asarray(u, np.float64)
        shape = t.shape
        t = np.ravel(t)
        if np.any(~((t >= 0) & (t <= self.n_segments))):
            raise ValueError(
                f"Curve parameter must be in range [0, {self.n_segments}]."
            )
        frac, inte = np.modf(t)
        inte = inte.astype(np.uint64)
        over = inte == self.n_segments
        inte[over] = self.n_segments - 1
        frac[over] = 1.0
        return inte, frac, shape

    def _evaluate(self, u: npt.ArrayLike, order: int) -> npt.NDArray[np.float64]:
        """Evaluate the curve or its derivative of the given order."""
        inte, frac, shape = self._locate(u)
        coeffs = self._coefficients
        if order:
            coeffs = npp.polyder(coeffs, order, axis=1)
        out = np.empty((frac.size, self.dimension), np.float64)
        for k in np.unique(inte):
            sel = inte == k
            # polyval broadcasts columns of coefficients against the local parameter
            out[sel, :] = npp.polyval(frac[sel], coeffs[k], tensor=True).T
        return out.reshape(shape + (self.dimension,))

    def __call__(self, u: npt.ArrayLike) -> npt.NDArray[np.float64]:
        """Compute curve interpolated at the parameter values.

        Parameters
        ----------
        u : array_like
            Values in :math:`[0, n]`, where :math:`n` is the number of segments.

        Returns
        -------
        array
            Points on the curve, with the shape of ``u`` followed by ``D``.
        """
        return self._evaluate(u, 0)

    def derivative(self, u: npt.ArrayLike) -> npt.NDArray[np.float64]:
        """Compute derivative of the curve with respect to its parameter.

        Parameters
        ----------
        u : array_like
            Values in :math:`[0, n]`, where :math:`n` is the number of segments.

        Returns
        -------
        array
            Tangent vectors, with the shape of ``u`` followed by ``D``. At integer
            values the tangent of the segment which starts there is used, except
            for the very end of the curve.
        """
        return self._evaluate(u, 1)

    def sample(self, interpolants: npt.ArrayLike) -> npt.NDArray[np.float64]:
        """Sample each segment at the same interpolants.

        This gives the same result as :func:`catmullrom.interpolate` for the same
        points and settings.
        """
        s = as_interpolants(interpolants)
        return read_only(
            _interpolate_windows(self._points, s, self.settings.spacing_tolerance)
        )

    def segment(self, i: int, request: DerivedCurves | None = None) -> SegmentCurves:
        """Return polynomials of a single segment.

        Parameters
        ----------
        i : int
            Index of the segment.
        request : DerivedCurves, optional
            Which derived polynomials to also compute.

        Returns
        -------
        SegmentCurves
            Polynomials of the segment.
        """
        if request is None:
            request = DerivedCurves()
        return derive_curves(_axis_polynomials(self._coefficients[i]), request)

    def __len__(self) -> int:
        """Return the number of segments."""
        return self.n_segments
