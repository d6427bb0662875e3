"""Settings which control how curves are built from points."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from catmullrom.geometry import SPACING_TOLERANCE


class EndpointExtension(Enum):
    """How the first and the last point of an open curve are treated.

    A Catmull-Rom segment only interpolates between its two inner points, so
    without any extension the curve starts at the second point and ends at the
    second to last one. Other options add a phantom point on each end, so that
    the curve passes through all points.
    """

    OMIT = "omit"
    """Curve covers only the second through the second to last point."""

    LINEAR = "linear"
    """Phantom points are reflections of the neighbouring point, e.g.
    :math:`2 p_0 - p_1`."""

    QUADRATIC = "quadratic"
    """Phantom points are extrapolated from a parabola through three points at the
    end, e.g. :math:`3 p_0 - 3 p_1 + p_2`."""


@dataclass(frozen=True)
class CurveSettings:
    """Type used to hold settings of a curve.

    Parameters
    ----------
    extension : EndpointExtension, default: EndpointExtension.OMIT
        How the ends of an open curve are handled.

    closed : bool, default: False
        Should the curve be closed into a loop. If so, the points wrap around and
        ``extension`` is ignored.

    spacing_tolerance : float, default: 1e-4
        Centripetal spacing bellow which consecutive points are considered to be
        the same point.
    """

    extension: EndpointExtension = EndpointExtension.OMIT
    closed: bool = False
    spacing_tolerance: float = SPACING_TOLERANCE

    def __post_init__(self) -> None:
        """Check that the values are valid."""
        if not isinstance(self.extension, EndpointExtension):
            raise TypeError(
                "Extension must be an EndpointExtension, instead it was "
                f"{type(self.extension).__name__}."
            )
        if not self.spacing_tolerance > 0:
            raise ValueError(
                f"Spacing tolerance must be positive (got {self.spacing_tolerance})."
            )


@dataclass(frozen=True)
class DerivedCurves:
    """Selects which derived polynomials of a segment are computed.

    Parameters
    ----------
    first_derivative : bool, default: False
        Compute the first derivative of each axis polynomial.

    second_derivative : bool, default: False
        Compute the second derivative of each axis polynomial.

    integral : bool, default: False
        Compute the antiderivative of each axis polynomial, which is zero at the
        start of the segment.
    """

    first_derivative: bool = False
    second_derivative: bool = False
    integral: bool = False
