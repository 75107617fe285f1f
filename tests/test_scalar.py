import math
import random

import pytest

from enginecore import scalar


@pytest.mark.parametrize("l, r", [(7.5, 2.0), (-7.5, 2.0), (10.0, 3.0), (-9.0, -4.0)])
def test_mod_matches_truncated_remainder(l, r):
    assert scalar.mod(l, r) == pytest.approx(math.fmod(l, r))


def test_mod_result_smaller_than_divisor():
    for l in (0.3, 5.7, -12.25, 100.0):
        assert abs(scalar.mod(l, 3.0)) < 3.0


@pytest.mark.parametrize("x", [0.0, 1.0, 2.0, 16.0, 0.25, 1e6])
def test_sqrt_squares_back(x):
    assert scalar.sqrt(x) ** 2 == pytest.approx(x)


def test_sqrt_negative_is_nan():
    assert str(scalar.sqrt(-1.0)) == "nan"


def test_ramp():
    assert scalar.ramp(-3.0) == 0.0
    assert scalar.ramp(2.5) == 2.5


@pytest.mark.parametrize("x", [0.1, 0.7, 1.3, -2.0, 3.0])
def test_trig_identities(x):
    assert scalar.sin(x) ** 2 + scalar.cos(x) ** 2 == pytest.approx(1.0)
    assert scalar.tan(x) == pytest.approx(math.tan(x))
    assert scalar.csc(x) * scalar.sin(x) == pytest.approx(1.0)
    assert scalar.sec(x) * scalar.cos(x) == pytest.approx(1.0)
    assert scalar.cot(x) * scalar.tan(x) == pytest.approx(1.0)


def test_csc_of_zero_raises():
    with pytest.raises(ZeroDivisionError):
        scalar.csc(0.0)


def test_lerp_endpoints():
    assert scalar.lerp(2.0, 8.0, 0.0) == 2.0
    assert scalar.lerp(2.0, 8.0, 1.0) == 8.0
    assert scalar.lerp(2.0, 8.0, 0.5) == scalar.avg(2.0, 8.0)


def test_maximum_minimum_choose_inputs():
    assert scalar.maximum(3, 9) == 9
    assert scalar.maximum(9, 3) == 9
    assert scalar.minimum(3, 9) == 3
    assert scalar.minimum(9, 3) == 3


def test_avg():
    assert scalar.avg(2.0, 4.0) == 3.0
    assert scalar.avg(5.0, 5.0) == 5.0


def test_clamp():
    assert scalar.clamp(5, 0, 10) == 5
    assert scalar.clamp(-5, 0, 10) == 0
    assert scalar.clamp(50, 0, 10) == 10


def test_constants_work_with_trig():
    assert scalar.sin(scalar.PI2) == pytest.approx(1.0)
    assert scalar.cos(scalar.PI) == pytest.approx(-1.0)
    assert scalar.tan(scalar.PI4) == pytest.approx(1.0)
    assert scalar.sin(90.0 * scalar.DEG_TO_RAD) == pytest.approx(1.0)
    assert scalar.lerp(0.0, scalar.RAD_TO_DEG, scalar.PI) == pytest.approx(180.0)
    assert scalar.avg(scalar.E, scalar.E) == pytest.approx(math.e)


def test_random_ranges():
    random.seed(1234)
    for _ in range(200):
        assert 0.0 <= scalar.random_unit() <= 1.0
        assert 0.0 <= scalar.random_below(5.0) <= 5.0
        assert -3.0 <= scalar.random_between(-3.0, 7.0) <= 7.0