"""Check conversion of input data."""

import numpy as np
import pytest
from catmullrom import (
    DimensionMismatchError,
    InsufficientPointsError,
    InterpolantRangeError,
    as_interpolants,
    as_points,
    into_unit_interval,
    uniform_interpolants,
)


def test_as_points_array():
    """Check float arrays are used as they are."""
    pts = np.zeros((5, 2), np.float64)
    assert as_points(pts) is pts


def test_as_points_int():
    """Check integer coordinates are converted to float."""
    pts = as_points([(0, 1), (2, 3), (4, 5), (6, 7)])
    assert pts.dtype == np.float64
    assert pts.shape == (4, 2)


def test_as_points_minimum():
    """Check minimum number of points is enforced."""
    with pytest.raises(InsufficientPointsError):
        as_points([])
    with pytest.raises(InsufficientPointsError):
        as_points(np.zeros((3, 2)))
    assert as_points([(0,), (1,)], minimum=2).shape == (2, 1)


def test_as_points_mismatch():
    """Check first mismatched point is reported."""
    with pytest.raises(DimensionMismatchError) as info:
        as_points([(0, 0, 0), (1, 1, 1), (2, 2, 2), (3, 3), (4, 4)])
    assert info.value.index == 3
    assert info.value.expected == 3
    assert info.value.got == 2


def test_as_points_invalid():
    """Check invalid coordinates are rejected."""
    with pytest.raises(ValueError):
        as_points([(0, 0), (1, np.inf), (2, 2), (3, 3)])
    with pytest.raises(ValueError):
        as_points(np.zeros((4, 0)))
    with pytest.raises(TypeError):
        as_points([1.0, 2.0, 3.0, 4.0])


def test_as_interpolants():
    """Check valid interpolants are converted."""
    s = as_interpolants((0, 0.5, 1))
    assert s.dtype == np.float64
    assert s == pytest.approx([0.0, 0.5, 1.0])


def test_as_interpolants_invalid():
    """Check invalid interpolants are rejected."""
    with pytest.raises(InterpolantRangeError):
        as_interpolants([0.0])
    with pytest.raises(InterpolantRangeError):
        as_interpolants([0.0, 1.0 + 1e-12])
    with pytest.raises(ValueError):
        as_interpolants(np.zeros((2, 2)))


@pytest.mark.parametrize("n", (2, 3, 5, 101))
def test_uniform_interpolants(n: int):
    """Check interpolants are equally spaced and include both ends."""
    s = uniform_interpolants(n)
    assert s.shape == (n,)
    assert s[0] == 0.0
    assert s[-1] == 1.0
    assert np.diff(s) == pytest.approx(1 / (n - 1))


def test_uniform_interpolants_too_few():
    """Check at least two interpolants are needed."""
    with pytest.raises(InterpolantRangeError):
        uniform_interpolants(1)


def test_into_unit_interval():
    """Check values are mapped onto [0, 1]."""
    assert into_unit_interval([2, 4, 6]) == pytest.approx([0.0, 0.5, 1.0])
    v = into_unit_interval([3.3, 0.1, 7.9, 1.7])
    assert v[1] == 0.0
    assert v[2] == 1.0
    assert np.all((v >= 0) & (v <= 1))


def test_into_unit_interval_constant():
    """Check constant values can not be mapped."""
    with pytest.raises(ValueError):
        into_unit_interval([1.0, 1.0, 1.0])
