import pytest

from soundblocks.decimator import Decimator


def test_defaults():
    d = Decimator()
    assert d.downsample_factor == 1.0
    assert d.bitcrush_factor == 0.0
    assert d.bits_to_crush == 0
    assert d.smooth_crushing is False


def test_hold_length_with_default_factor():
    d = Decimator()
    out = [d.process(0.5) for _ in range(97)]
    assert all(v == 0.0 for v in out[:96])
    assert out[96] == 0.5


def test_zero_factor_passes_through():
    d = Decimator()
    d.downsample_factor = 0.0
    for v in (0.5, -0.25, 0.125):
        assert d.process(v) == v


def test_full_crush_keeps_integer_part():
    d = Decimator()
    d.downsample_factor = 0.0
    d.bits_to_crush = 16
    assert d.process(1.5) == 1.0
    assert d.process(0.75) == 0.0
    assert d.process(-0.5) == -1.0


def test_bits_to_crush_clamped_and_disables_smooth():
    d = Decimator()
    d.smooth_crushing = True
    d.bits_to_crush = 40
    assert d.bits_to_crush == 16
    assert d.smooth_crushing is False


def test_negative_bits_rejected():
    d = Decimator()
    d.bits_to_crush = 4
    with pytest.raises(ValueError):
        d.bits_to_crush = -1
    assert d.bits_to_crush == 4


def test_bitcrush_factor_sets_bits():
    d = Decimator()
    d.bitcrush_factor = 0.5
    assert d.bits_to_crush == 8
    assert d.bitcrush_factor == 0.5


def test_smooth_crushing_error_bounded():
    d = Decimator()
    d.downsample_factor = 0.0
    d.smooth_crushing = True
    d.bitcrush_factor = 0.25
    for v in (0.1, -0.3, 0.7, -0.9):
        out = d.process(v)
        assert abs(out - v) < 0.01


def test_crushing_is_idempotent_on_quantised_value():
    d = Decimator()
    d.downsample_factor = 0.0
    d.bits_to_crush = 8
    first = d.process(0.3712)
    assert d.process(first) == first