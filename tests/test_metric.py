import math

import pytest

from hypcanvas import ONE, ZERO, Complex, distance, origin_distance, polar


@pytest.mark.parametrize("theta", [0.0, 1.0, math.pi, -2.0])
def test_polar_zero_radius_is_origin(theta: float) -> None:
    assert polar(0.0, theta) == ZERO


@pytest.mark.parametrize("r", [0.1, 1.0, 2.5, 6.0])
def test_polar_radius_is_hyperbolic_distance(r: float) -> None:
    p = polar(r, 0.8)

    assert p.magnitude() == pytest.approx(math.tanh(r / 2.0))
    assert origin_distance(p) == pytest.approx(r, rel=1e-9)
    assert distance(ZERO, p) == pytest.approx(r, rel=1e-9)


def test_distance_is_symmetric_and_zero_on_diagonal() -> None:
    z1 = Complex(0.3, -0.2)
    z2 = Complex(-0.6, 0.5)

    assert distance(z1, z1) == 0.0
    assert distance(z1, z2) == pytest.approx(distance(z2, z1))
    assert distance(z1, z2) > 0.0


def test_distance_along_a_diameter_adds_up() -> None:
    a = polar(1.5, math.pi)
    b = polar(0.75, 0.0)

    assert distance(a, b) == pytest.approx(2.25, rel=1e-9)


def test_ideal_points_are_infinitely_far() -> None:
    assert origin_distance(ONE) == math.inf
    assert distance(ZERO, Complex.unit(0.4)) == math.inf
