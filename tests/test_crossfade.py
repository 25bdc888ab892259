import math

import pytest

from soundblocks.crossfade import CrossFade, CrossFadeCurve


def test_default_is_linear_midpoint():
    cf = CrossFade()
    assert cf.curve is CrossFadeCurve.LIN
    assert cf.process(2.0, 4.0) == pytest.approx(3.0)


@pytest.mark.parametrize("curve", [CrossFadeCurve.LIN, CrossFadeCurve.EXP, CrossFadeCurve.CPOW])
def test_endpoints_select_inputs(curve):
    cf = CrossFade(curve)
    cf.pos = 0.0
    assert cf.process(1.5, -2.0) == pytest.approx(1.5)
    cf.pos = 1.0
    assert cf.process(1.5, -2.0) == pytest.approx(-2.0)


def test_constant_power_midpoint():
    cf = CrossFade(CrossFadeCurve.CPOW)
    assert cf.process(1.0, 1.0) == pytest.approx(2.0 * math.sin(math.pi / 4.0))


def test_log_curve_end_is_second_input():
    cf = CrossFade(CrossFadeCurve.LOG)
    cf.pos = 1.0
    assert cf.process(3.0, 7.0) == pytest.approx(7.0)


def test_log_curve_start_nearly_first_input():
    cf = CrossFade(CrossFadeCurve.LOG)
    cf.pos = 0.0
    assert cf.process(3.0, 7.0) == pytest.approx(3.0, abs=1e-4)


def test_exp_curve_leans_toward_first_input():
    lin = CrossFade(CrossFadeCurve.LIN)
    exp = CrossFade(CrossFadeCurve.EXP)
    assert exp.process(0.0, 1.0) < lin.process(0.0, 1.0)


def test_invalid_curve_raises():
    with pytest.raises(ValueError):
        CrossFade(7)