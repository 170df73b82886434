import pytest

from ttydsp.threshold import DynamicThreshold


def test_starts_at_zero_during_first_mark():
    dt = DynamicThreshold()
    assert dt.update(1.0, 0.0) == 0.0


def test_converges_to_half_peak_difference():
    dt = DynamicThreshold()
    value = 0.0
    for n in range(8000):
        if (n // 100) % 2 == 0:
            value = dt.update(1.0, 0.0)
        else:
            value = dt.update(0.0, 0.4)
    assert value == pytest.approx(0.3, abs=0.01)


def test_equal_peaks_give_zero_threshold():
    dt = DynamicThreshold()
    value = 1.0
    for n in range(8000):
        if (n // 100) % 2 == 0:
            value = dt.update(0.8, 0.0)
        else:
            value = dt.update(0.0, 0.8)
    assert value == pytest.approx(0.0, abs=1e-6)


def test_threshold_attribute_matches_return():
    dt = DynamicThreshold()
    for _ in range(10):
        dt.update(0.0, 0.5)
    result = dt.update(0.9, 0.1)
    assert dt.threshold == result


def test_steady_space_gives_negative_threshold():
    dt = DynamicThreshold()
    for _ in range(200):
        dt.update(1.0, 0.0)
    for _ in range(200):
        dt.update(0.0, 0.6)
    value = 0.0
    for _ in range(4000):
        value = dt.update(1.0, 0.0)
    # mark peak 1.0 minus space peak 0.6, halved
    assert value == pytest.approx(0.2, abs=0.01)