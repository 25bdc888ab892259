import math

import pytest

from soundblocks.autowah import Autowah


def _sine(n, freq=220.0, sr=48000.0):
    return [0.8 * math.sin(2.0 * math.pi * freq * i / sr) for i in range(n)]


def test_defaults_pass_signal_through():
    aw = Autowah(48000.0)
    signal = _sine(200)
    assert [aw.process(x) for x in signal] == pytest.approx(signal)


def test_fully_dry_full_wah_passes_through():
    aw = Autowah(48000.0)
    aw.wah = 1.0
    aw.dry_wet = 0.0
    signal = _sine(200)
    assert [aw.process(x) for x in signal] == pytest.approx(signal)


def test_silence_stays_silent():
    aw = Autowah(48000.0)
    aw.wah = 1.0
    assert all(aw.process(0.0) == 0.0 for _ in range(100))


def test_wah_changes_signal_and_stays_finite():
    aw = Autowah(48000.0)
    aw.wah = 1.0
    aw.level = 1.0
    signal = _sine(2000)
    out = [aw.process(x) for x in signal]
    assert all(math.isfinite(v) for v in out)
    assert max(abs(a - b) for a, b in zip(out, signal)) > 1e-6


def test_same_input_same_output():
    a = Autowah(44100.0)
    b = Autowah(44100.0)
    a.wah = b.wah = 0.7
    signal = _sine(500)
    assert [a.process(x) for x in signal] == [b.process(x) for x in signal]