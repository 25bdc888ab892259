import pytest

from soundblocks.adenv import AdEnv, AdEnvSegment


def make_env():
    env = AdEnv(1000)
    env.set_time(AdEnvSegment.ATTACK, 0.01)
    env.set_time(AdEnvSegment.DECAY, 0.01)
    return env


def test_idle_returns_min():
    env = AdEnv(1000)
    env.min = 2.0
    env.max = 4.0
    assert env.process() == 2.0
    assert not env.is_running


def test_initial_value():
    env = AdEnv(48000)
    assert env.value == pytest.approx(0.0001)
    assert env.current_segment is AdEnvSegment.IDLE


def test_trigger_starts_attack():
    env = make_env()
    env.trigger()
    env.process()
    assert env.is_running
    assert env.current_segment is AdEnvSegment.ATTACK


def test_attack_is_rising_then_decay_falling():
    env = make_env()
    env.trigger()
    out = [env.process() for _ in range(30)]
    peak = out.index(max(out))
    rising = out[: peak + 1]
    falling = [v for v in out[peak:] if v > 0]
    assert rising == sorted(rising)
    assert falling == sorted(falling, reverse=True)


def test_retrigger_restarts_attack():
    env = make_env()
    env.trigger()
    for _ in range(15):
        env.process()
    assert env.current_segment is AdEnvSegment.DECAY
    env.trigger()
    env.process()
    assert env.current_segment is AdEnvSegment.ATTACK


def test_curved_envelope_stays_finite():
    env = make_env()
    env.curve = 5.0
    env.trigger()
    out = [env.process() for _ in range(200)]
    assert all(v == v for v in out)
    assert not env.is_running


def test_set_time_rejects_unknown_segment():
    env = AdEnv(1000)
    with pytest.raises(ValueError):
        env.set_time(7, 0.1)