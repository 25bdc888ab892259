import math

from soundblocks.analogbassdrum import AnalogBassDrum


def test_silent_before_trigger():
    drum = AnalogBassDrum(48000)
    assert all(drum.process() == 0.0 for _ in range(2000))


def test_trigger_produces_sound():
    drum = AnalogBassDrum(48000)
    values = [drum.process(i == 0) for i in range(2000)]
    assert all(math.isfinite(v) for v in values)
    assert max(abs(v) for v in values) > 0.0


def test_trig_matches_process_trigger():
    a = AnalogBassDrum(48000)
    b = AnalogBassDrum(48000)
    a.trig()
    out_a = [a.process() for _ in range(500)]
    out_b = [b.process(i == 0) for i in range(500)]
    assert out_a == out_b


def test_sound_decays():
    drum = AnalogBassDrum(48000)
    values = [drum.process(i == 0) for i in range(44000)]
    early = sum(abs(v) for v in values[:2000])
    late = sum(abs(v) for v in values[42000:])
    assert early > 0.0
    assert late < early * 0.1


def test_sustain_keeps_sounding_without_trigger():
    drum = AnalogBassDrum(48000)
    drum.sustain = True
    values = [drum.process() for _ in range(12000)]
    assert max(abs(v) for v in values[10000:]) > 0.0


def test_parameters_are_clamped():
    drum = AnalogBassDrum(48000)
    drum.accent = 2.0
    drum.tone = -1.0
    drum.freq = 1.0e6
    assert drum.accent == 1.0
    assert drum.tone == 0.0
    assert drum.freq == 24000.0


def test_unclamped_settings_round_trip():
    drum = AnalogBassDrum(48000)
    drum.decay = 0.7
    drum.attack_fm_amount = 0.2
    drum.self_fm_amount = 0.9
    assert (drum.decay, drum.attack_fm_amount, drum.self_fm_amount) == (0.7, 0.2, 0.9)