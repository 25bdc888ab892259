import pytest

from soundblocks.adsr import Adsr, AdsrSegment


def test_no_gate_stays_idle():
    env = Adsr(1000)
    out = [env.process(False) for _ in range(10)]
    assert out == [0.0] * 10
    assert not env.is_running


def test_gate_reaches_peak_then_sustain():
    env = Adsr(1000)
    out = [env.process(True) for _ in range(1000)]
    assert max(out) == 1.0
    assert out[-1] == pytest.approx(0.7, abs=0.01)
    assert env.current_segment is AdsrSegment.DECAY


def test_attack_rises_monotonically():
    env = Adsr(1000)
    out = []
    while env.current_segment is not AdsrSegment.DECAY or not out:
        out.append(env.process(True))
    assert out == sorted(out)
    assert out[-1] == 1.0


def test_release_returns_to_idle():
    env = Adsr(1000)
    for _ in range(1000):
        env.process(True)
    env.process(False)
    assert env.current_segment is AdsrSegment.RELEASE
    out = [env.process(False) for _ in range(2000)]
    assert out[-1] == 0.0
    assert min(out) >= 0.0
    assert not env.is_running


def test_zero_attack_is_instant():
    env = Adsr(1000)
    env.set_attack_time(0.0)
    assert env.process(True) == 1.0
    assert env.current_segment is AdsrSegment.DECAY


def test_sustain_level_clamped():
    env = Adsr(1000)
    env.sustain_level = 2.0
    assert env.sustain_level == 1.0
    env.sustain_level = -3.0
    assert env.sustain_level == -0.01


def test_zero_sustain_goes_idle_while_gated():
    env = Adsr(1000)
    env.sustain_level = 0.0
    out = [env.process(True) for _ in range(2000)]
    assert out[-1] == 0.0
    assert not env.is_running


def test_hard_retrigger_resets_level():
    env = Adsr(1000)
    for _ in range(1000):
        env.process(True)
    before = env.process(True)
    env.retrigger(True)
    assert env.current_segment is AdsrSegment.ATTACK
    assert env.process(True) < before


def test_soft_retrigger_continues_from_level():
    env = Adsr(1000)
    for _ in range(1000):
        env.process(True)
    before = env.process(True)
    env.retrigger(False)
    assert env.process(True) > before


def test_longer_attack_is_slower():
    fast = Adsr(1000)
    slow = Adsr(1000)
    slow.set_time(AdsrSegment.ATTACK, 0.5)
    assert slow.process(True) < fast.process(True)


def test_block_size_scales_rate():
    per_sample = Adsr(1000)
    per_block = Adsr(1000, 10)
    assert per_block.process(True) > per_sample.process(True)


def test_set_time_rejects_unknown_segment():
    env = Adsr(1000)
    with pytest.raises(ValueError):
        env.set_time(3, 0.1)