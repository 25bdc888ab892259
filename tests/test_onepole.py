import math

import pytest

from soundblocks.onepole import OnePole, OnePoleMode


def _signal(count=300):
    return [math.sin(n * 0.1) + 0.3 * math.cos(n * 0.77) for n in range(count)]


def test_default_mode_is_low_pass():
    assert OnePole().mode is OnePoleMode.LOW_PASS


def test_lowpass_passes_dc():
    f = OnePole()
    f.frequency = 0.01
    out = f.process_block([1.0] * 5000)
    assert out[-1] == pytest.approx(1.0, abs=1e-6)


def test_highpass_blocks_dc():
    f = OnePole()
    f.frequency = 0.01
    f.mode = OnePoleMode.HIGH_PASS
    out = f.process_block([1.0] * 5000)
    assert out[-1] == pytest.approx(0.0, abs=1e-6)


def test_low_and_high_sum_to_input():
    lp = OnePole()
    hp = OnePole()
    lp.frequency = hp.frequency = 0.05
    hp.mode = OnePoleMode.HIGH_PASS
    for x in _signal():
        assert lp.process(x) + hp.process(x) == pytest.approx(x, abs=1e-12)


def test_frequency_is_clipped():
    f = OnePole()
    f.frequency = 0.6
    assert f.frequency == 0.497


def test_block_matches_per_sample():
    a = OnePole()
    b = OnePole()
    a.frequency = b.frequency = 0.1
    signal = _signal()
    assert a.process_block(signal) == [b.process(x) for x in signal]


def test_reset_restores_fresh_behaviour():
    f = OnePole()
    f.frequency = 0.1
    first = f.process_block(_signal(50))
    f.reset()
    assert f.process_block(_signal(50)) == first


def test_zero_frequency_outputs_zero():
    f = OnePole()
    f.frequency = 0.0
    assert f.process_block([1.0, -1.0, 0.5]) == [0.0, 0.0, 0.0]