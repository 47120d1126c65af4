import numpy as np
import pytest
from scipy import stats

from eeg_sim.core.exceptions import InvalidOnsetError
from eeg_sim.onset.onsets import (
    DistributionOnset, FixedOnset, LogNormalOnset, UniformOnset, simulate_onsets,
)


def test_fixed_gaps_accumulate():
    onsets = simulate_onsets(np.random.default_rng(0), FixedOnset([20, 50], offset=0), 2)
    assert onsets.tolist() == [20, 70]


def test_offset_added_to_every_gap():
    onsets = simulate_onsets(np.random.default_rng(0), FixedOnset([0, 0, 0], offset=5), 3)
    assert onsets.tolist() == [5, 10, 15]


@pytest.mark.parametrize("seed", range(5))
def test_uniform_onsets_strictly_increasing(seed):
    onsets = simulate_onsets(np.random.default_rng(seed), UniformOnset(width=30, offset=1), 200)
    assert len(onsets) == 200
    assert onsets[0] >= 0
    assert np.all(np.diff(onsets) > 0)
    assert np.all(np.diff(onsets) <= 31)


def test_lognormal_truncation():
    onset = LogNormalOnset(mu=3.0, sigma=1.0, offset=2, truncate_upper=40)
    onsets = simulate_onsets(np.random.default_rng(3), onset, 100)
    gaps = np.diff(onsets)
    assert np.all(gaps >= 2)
    assert np.all(gaps <= 42)


def test_scipy_distribution_onsets():
    onset = DistributionOnset(stats.expon(scale=20), offset=1)
    onsets = simulate_onsets(np.random.default_rng(7), onset, 50)
    assert onsets.dtype == np.int64
    assert np.all(np.diff(onsets) > 0)


def test_negative_gap_raises():
    with pytest.raises(InvalidOnsetError):
        simulate_onsets(np.random.default_rng(0), FixedOnset([5, -1]), 2)


def test_negative_distribution_draw_raises():
    onset = DistributionOnset(stats.norm(loc=-10, scale=1))
    with pytest.raises(InvalidOnsetError):
        simulate_onsets(np.random.default_rng(0), onset, 10)


def test_small_negative_draw_is_not_rounded_away():
    # Draws in [-0.4, -0.1] would round to zero
    onset = DistributionOnset(stats.uniform(loc=-0.4, scale=0.3), offset=5)
    with pytest.raises(InvalidOnsetError):
        simulate_onsets(np.random.default_rng(0), onset, 4)
    with pytest.raises(InvalidOnsetError):
        simulate_onsets(np.random.default_rng(0), FixedOnset([3.0, -0.2], offset=5), 2)


def test_negative_offset_raises():
    with pytest.raises(InvalidOnsetError):
        simulate_onsets(np.random.default_rng(0), FixedOnset([10, 10], offset=-1), 2)


def test_coincident_onsets_raise():
    with pytest.raises(InvalidOnsetError):
        simulate_onsets(np.random.default_rng(0), FixedOnset([3, 0]), 2)


def test_first_onset_may_be_zero():
    onsets = simulate_onsets(np.random.default_rng(0), FixedOnset([0, 4]), 2)
    assert onsets.tolist() == [0, 4]


def test_same_stream_same_onsets():
    onset = UniformOnset(width=50, offset=1)
    a = simulate_onsets(np.random.default_rng(42), onset, 30)
    b = simulate_onsets(np.random.default_rng(42), onset, 30)
    np.testing.assert_array_equal(a, b)


def test_zero_events():
    onsets = simulate_onsets(np.random.default_rng(0), UniformOnset(), 0)
    assert onsets.shape == (0,)
