import pytest

from soundblocks.fir import FirFilter


def test_impulse_response_is_tail_first():
    fir = FirFilter([1.0, 2.0, 3.0])
    out = [fir.process(x) for x in [1.0, 0.0, 0.0, 0.0]]
    assert out == [3.0, 2.0, 1.0, 0.0]


def test_reverse_gives_head_first_response():
    fir = FirFilter([1.0, 2.0, 3.0], reverse=True)
    out = [fir.process(x) for x in [1.0, 0.0, 0.0]]
    assert out == [1.0, 2.0, 3.0]


def test_truncation_keeps_first_coefficients():
    fir = FirFilter([1.0, 2.0, 3.0], max_size=2)
    assert fir.coefficients == [1.0, 2.0]


def test_truncation_with_reverse_starts_from_full_length():
    fir = FirFilter([1.0, 2.0, 3.0], max_size=2, reverse=True)
    assert fir.coefficients == [3.0, 2.0]


def test_block_matches_sample_by_sample():
    signal = [0.5, -1.0, 0.25, 2.0, 0.0, -0.75]
    a = FirFilter([0.1, 0.2, 0.3, 0.4])
    b = FirFilter([0.1, 0.2, 0.3, 0.4])
    assert a.process_block(signal) == [b.process(x) for x in signal]


def test_reset_clears_history():
    fir = FirFilter([1.0, 1.0])
    fir.process(5.0)
    fir.reset()
    assert fir.process(0.0) == 0.0


def test_set_ir_resets_state():
    fir = FirFilter([1.0, 1.0])
    fir.process(5.0)
    fir.set_ir([2.0, 0.0])
    assert fir.process(1.0) == 0.0


def test_block_longer_than_max_block_raises():
    fir = FirFilter([1.0, 2.0], max_block=2)
    with pytest.raises(ValueError):
        fir.process_block([1.0, 2.0, 3.0])


def test_empty_filter_raises():
    fir = FirFilter([])
    with pytest.raises(ValueError):
        fir.process(1.0)


def test_single_tap_is_gain():
    fir = FirFilter([0.5])
    assert fir.process_block([2.0, 4.0]) == [1.0, 2.0]