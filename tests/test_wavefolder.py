import pytest

from soundblocks.wavefolder import Wavefolder


@pytest.mark.parametrize("x", [-0.9, -0.5, 0.0, 0.3, 0.99])
def test_in_range_passes_through(x):
    assert Wavefolder().process(x) == pytest.approx(x)


def test_fold_above_one():
    assert Wavefolder().process(1.5) == pytest.approx(0.5)


@pytest.mark.parametrize("x", [v / 7.0 for v in range(-60, 61)])
def test_output_bounded(x):
    out = Wavefolder(gain=3.3, offset=0.1).process(x)
    assert -1.0 <= out <= 1.0


def test_gain_applied_after_offset():
    assert Wavefolder(gain=0.5, offset=0.4).process(0.2) == pytest.approx(0.3)


def test_negative_gain_inverts():
    assert Wavefolder(gain=-1.0).process(0.4) == pytest.approx(-0.4)


def test_periodic_in_four():
    wf = Wavefolder()
    assert wf.process(0.7 + 4.0) == pytest.approx(wf.process(0.7))