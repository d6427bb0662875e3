"""Check cubics of a single segment."""

import logging

import numpy as np
import pytest
from catmullrom import (
    DerivedCurves,
    InsufficientPointsError,
    catmullrom_cubic,
    centripetal_spacing,
    hermite_cubic,
    interpolate_segment,
    segment_curves,
    segment_polynomials,
)
from scipy.integrate import quad
from scipy.interpolate import CubicHermiteSpline


@pytest.mark.parametrize("seed", (0, 1, 2, 3))
def test_hermite_cubic(seed: int):
    """Check Hermite cubic matches values and derivatives at the ends."""
    np.random.seed(seed)
    x0, x1, dx0, dx1 = np.random.random_sample(4) * 10 - 5
    p = hermite_cubic(x0, x1, dx0, dx1)
    dp = p.deriv()
    assert p(0.0) == x0
    assert p(1.0) == pytest.approx(x1)
    assert dp(0.0) == dx0
    assert dp(1.0) == pytest.approx(dx1)

    ref = CubicHermiteSpline([0.0, 1.0], [x0, x1], [dx0, dx1])
    s = np.linspace(0, 1, 21)
    assert p(s) == pytest.approx(ref(s))


def test_hermite_cubic_coefficients():
    """Check coefficients are in order from the constant term."""
    p = hermite_cubic(1.0, 2.0, 3.0, 4.0)
    assert p.coef == pytest.approx([1.0, 3.0, -3 + 6 - 6 - 4, 2 - 4 + 3 + 4])


def test_uniform_tangents():
    """Check equal spacing gives the tangents of a uniform Catmull-Rom spline."""
    x0, x1, x2, x3 = 0.3, 1.2, -0.7, 2.5
    p = catmullrom_cubic(x0, x1, x2, x3, 1.0, 1.0, 1.0)
    dp = p.deriv()
    assert dp(0.0) == pytest.approx((x2 - x0) / 2)
    assert dp(1.0) == pytest.approx((x3 - x1) / 2)


def test_tangents_scaled():
    """Check tangents are scaled by the middle spacing."""
    x0, x1, x2, x3 = 0.0, 1.0, 3.0, 4.0
    dt0, dt1, dt2 = 1.0, 2.0, 0.5
    p = catmullrom_cubic(x0, x1, x2, x3, dt0, dt1, dt2)
    t1 = (x1 - x0) / dt0 - (x2 - x0) / (dt0 + dt1) + (x2 - x1) / dt1
    t2 = (x2 - x1) / dt1 - (x3 - x1) / (dt1 + dt2) + (x3 - x2) / dt2
    dp = p.deriv()
    assert dp(0.0) == pytest.approx(t1 * dt1)
    assert dp(1.0) == pytest.approx(t2 * dt1)


def test_centripetal_spacing():
    """Check spacing is the square root of distance."""
    pts = [(0, 0), (4, 0), (4, 9), (4, 10)]
    assert centripetal_spacing(pts) == pytest.approx((2.0, 3.0, 1.0))


def test_centripetal_spacing_repeated():
    """Check repeated points do not give zero spacing."""
    assert centripetal_spacing([(0, 0), (0, 0), (1, 0), (2, 0)]) == (1.0, 1.0, 1.0)
    assert centripetal_spacing([(0, 0), (1, 0), (1, 0), (5, 0)]) == (1.0, 1.0, 2.0)


@pytest.mark.parametrize("d", (1, 2, 3, 6))
def test_polynomials_at_ends(d: int):
    """Check axis cubics go from the second to the third point."""
    np.random.seed(d)
    pts = np.random.random_sample((4, d))
    polys = segment_polynomials(pts)
    assert len(polys) == d
    for i, p in enumerate(polys):
        assert p.degree() <= 3
        assert p(0.0) == pytest.approx(pts[1, i])
        assert p(1.0) == pytest.approx(pts[2, i])


@pytest.mark.parametrize("d,n", ((2, 2), (3, 5), (4, 17)))
def test_interpolate_segment(d: int, n: int):
    """Check segment samples copy the ends and evaluate cubics in between."""
    np.random.seed(n)
    pts = np.random.random_sample((4, d))
    s = np.linspace(0, 1, n)
    out = interpolate_segment(pts, s)
    assert out.shape == (n, d)
    np.testing.assert_array_equal(out[0], pts[1])
    np.testing.assert_array_equal(out[-1], pts[2])
    polys = segment_polynomials(pts)
    for i, p in enumerate(polys):
        assert out[1:-1, i] == pytest.approx(p(s[1:-1]))


def test_interpolate_segment_repeated_points(caplog):
    """Check coincident points give finite values."""
    caplog.set_level(logging.DEBUG, logger="catmullrom.geometry")
    pts = [(1.0, 1.0), (1.0, 1.0), (1.0, 1.0), (2.0, 3.0)]
    out = interpolate_segment(pts, np.linspace(0, 1, 9))
    assert np.all(np.isfinite(out))
    assert "degenerate" in caplog.text


def test_interpolate_segment_point_count():
    """Check a segment needs exactly four points."""
    with pytest.raises(InsufficientPointsError):
        interpolate_segment([(0, 0), (1, 1), (2, 0)], [0.0, 1.0])
    with pytest.raises(ValueError):
        interpolate_segment([(0, 0), (1, 1), (2, 0), (3, 1), (4, 0)], [0.0, 1.0])


def test_segment_curves_default():
    """Check no derived polynomials are computed unless requested."""
    curves = segment_curves([(0, 0), (1, 1), (2, 0), (3, 1)])
    assert curves.dimension == 2
    assert curves.first_derivatives is None
    assert curves.second_derivatives is None
    assert curves.integrals is None


def test_segment_curves_second_only():
    """Check second derivative can be requested without the first."""
    pts = [(0, 0), (1, 2), (3, 3), (4, 1)]
    curves = segment_curves(pts, DerivedCurves(second_derivative=True))
    assert curves.first_derivatives is None
    assert curves.integrals is None
    assert curves.second_derivatives is not None
    for p, d2 in zip(curves.polynomials, curves.second_derivatives):
        assert d2.coef == pytest.approx(p.deriv(2).coef)


@pytest.mark.parametrize("seed", (0, 1, 2))
def test_segment_curves_derived(seed: int):
    """Check derived polynomials against finite differences and quadrature."""
    np.random.seed(seed)
    pts = np.random.random_sample((4, 3))
    curves = segment_curves(
        pts, DerivedCurves(first_derivative=True, second_derivative=True, integral=True)
    )
    assert curves.first_derivatives is not None
    assert curves.second_derivatives is not None
    assert curves.integrals is not None
    h = 1e-6
    for p, d1, d2, i1 in zip(
        curves.polynomials,
        curves.first_derivatives,
        curves.second_derivatives,
        curves.integrals,
    ):
        for s in (0.2, 0.5, 0.9):
            assert d1(s) == pytest.approx((p(s + h) - p(s - h)) / (2 * h), rel=1e-5)
            assert d2(s) == pytest.approx(d1.deriv()(s))
            assert i1(s) == pytest.approx(quad(p, 0, s)[0])
        assert i1(0.0) == 0.0
