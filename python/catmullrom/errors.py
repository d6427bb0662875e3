"""Exceptions raised when the input of an interpolation can not be used."""

from __future__ import annotations


class CatmullRomError(Exception):
    """Base class for all errors raised by the package."""


class InsufficientPointsError(CatmullRomError, ValueError):
    """Raised when there are not enough points to build a cubic segment.

    Parameters
    ----------
    n_points : int
        Number of points which were given.
    required : int, default: 4
        Minimum number of points needed.
    """

    n_points: int
    required: int

    def __init__(self, n_points: int, required: int = 4) -> None:
        self.n_points = int(n_points)
        self.required = int(required)
        super().__init__(
            f"At least {self.required} points are required, but only {self.n_points} "
            "were given."
        )


class DimensionMismatchError(CatmullRomError, ValueError):
    """Raised when points in the same sequence do not share their dimension.

    Parameters
    ----------
    index : int
        Index of the first point with the wrong dimension.
    expected : int
        Dimension of the first point in the sequence.
    got : int
        Dimension of the point at ``index``.
    """

    index: int
    expected: int
    got: int

    def __init__(self, index: int, expected: int, got: int) -> None:
        self.index = int(index)
        self.expected = int(expected)
        self.got = int(got)
        super().__init__(
            f"Point {self.index} has {self.got} coordinates, but the first point has "
            f"{self.expected}."
        )


class InterpolantRangeError(CatmullRomError, ValueError):
    """Raised when interpolant values can not be used to sample a segment."""
