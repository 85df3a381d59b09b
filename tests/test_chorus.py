import pytest

from wavesynth.chorus import Chorus

SAMPLE_RATE = 1000


def _chorus():
    return Chorus(SAMPLE_RATE, 0.01, 0.005, 10.0)


def _run(chorus, left, right):
    out_l = [0.0] * len(left)
    out_r = [0.0] * len(right)
    chorus.process(left, right, out_l, out_r)
    return out_l, out_r


def test_silence_in_gives_silence_out():
    out_l, out_r = _run(_chorus(), [0.0] * 100, [0.0] * 100)
    assert out_l == [0.0] * 100
    assert out_r == [0.0] * 100


def test_first_output_comes_from_empty_delay_line():
    out_l, out_r = _run(_chorus(), [1.0] * 10, [1.0] * 10)
    assert out_l[0] == 0.0
    assert out_r[0] == 0.0


def test_constant_input_reaches_steady_state():
    out_l, out_r = _run(_chorus(), [1.0] * 300, [1.0] * 300)
    assert out_l[100:] == pytest.approx([1.0] * 200)
    assert out_r[100:] == pytest.approx([1.0] * 200)


def test_channels_are_independent():
    left = [1.0 if i % 5 == 0 else 0.0 for i in range(200)]
    out_l, out_r = _run(_chorus(), left, [0.0] * 200)
    assert out_r == [0.0] * 200
    assert any(v != 0.0 for v in out_l)


def test_mute_clears_delay_lines():
    chorus = _chorus()
    _run(chorus, [1.0] * 50, [1.0] * 50)
    chorus.mute()
    out_l, out_r = _run(chorus, [0.0] * 50, [0.0] * 50)
    assert out_l == [0.0] * 50
    assert out_r == [0.0] * 50


def test_output_is_bounded_by_input_range():
    left = [((i * 7) % 13) / 13.0 for i in range(500)]
    right = [-v for v in left]
    out_l, out_r = _run(_chorus(), left, right)
    assert all(-1e-9 <= v <= 1.0 + 1e-9 for v in out_l)
    assert all(-1.0 - 1e-9 <= v <= 1e-9 for v in out_r)


def test_processing_in_blocks_matches_processing_at_once():
    left = [((i * 3) % 17) / 17.0 for i in range(240)]
    right = [((i * 5) % 19) / 19.0 for i in range(240)]
    whole_l, whole_r = _run(_chorus(), left, right)

    chorus = _chorus()
    parts_l, parts_r = [], []
    for start in range(0, 240, 60):
        out_l, out_r = _run(chorus, left[start:start + 60], right[start:start + 60])
        parts_l += out_l
        parts_r += out_r

    assert parts_l == pytest.approx(whole_l)
    assert parts_r == pytest.approx(whole_r)