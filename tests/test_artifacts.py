import numpy as np
import pytest

from eeg_sim.artifacts.artifacts import (
    ARDriftNoise, DCDriftNoise, DriftNoise, EyeMovement, LinearDriftNoise, PowerLineNoise,
    UserDefinedContinuousSignal,
)
from eeg_sim.artifacts.control_signals import GazeDirectionVectors, HREFCoordinates
from eeg_sim.core.exceptions import ConfigMismatchError, ControlSignalError
from eeg_sim.headmodel.headmodel import LeadfieldHeadmodel


@pytest.fixture
def eye_headmodel():
    # 2 channels; one source per eye label
    leadfield = np.array([
        [[1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0]],
        [[0.0, 2.0, 0.0], [1.0, 0.0, 0.0], [0.0, 1.0, 0.0]],
    ])
    return LeadfieldHeadmodel(leadfield, ["eye_center", "cornea", "retina"])


def test_power_line_harmonics():
    artifact = PowerLineNoise(base_freq=50, harmonics=[1, 3, 5], weights_harmonics=[1, 1, 1],
                              sampling_rate=1000)
    signal = artifact.simulate(np.random.default_rng(0), 1000, 1)

    t = np.arange(1000) / 1000
    expected = sum(np.sin(2 * np.pi * f * t) for f in (50, 150, 250))
    assert signal.shape == (1, 1000)
    np.testing.assert_allclose(signal[0], expected, atol=1e-9)


def test_power_line_harmonic_weights():
    artifact = PowerLineNoise(harmonics=[1, 3], weights_harmonics=[2.0, 0.0], sampling_rate=1000)
    signal = artifact.simulate(np.random.default_rng(0), 200, 1)
    t = np.arange(200) / 1000
    np.testing.assert_allclose(signal[0], 2.0 * np.sin(2 * np.pi * 50 * t), atol=1e-9)


def test_power_line_weight_mismatch():
    artifact = PowerLineNoise(harmonics=[1, 3, 5], weights_harmonics=[1, 1])
    with pytest.raises(ConfigMismatchError):
        artifact.simulate(np.random.default_rng(0), 100, 1)


def test_power_line_channel_weights():
    artifact = PowerLineNoise(channel_weights=[1.0, 0.5, 0.0])
    signal = artifact.simulate(np.random.default_rng(0), 100, 3)
    assert signal.shape == (3, 100)
    np.testing.assert_allclose(signal[1], 0.5 * signal[0])
    assert not signal[2].any()


def test_linear_and_dc_drift():
    rng = np.random.default_rng(0)
    np.testing.assert_allclose(LinearDriftNoise(scaling_factor=2.0).simulate(rng, 5, 1)[0],
                               [0.0, 0.5, 1.0, 1.5, 2.0])
    np.testing.assert_array_equal(DCDriftNoise(scaling_factor=3.0).simulate(rng, 4, 1), [[3.0] * 4])


def test_ar_drift_is_random_walk():
    drift = ARDriftNoise(sigma=0.5).simulate(np.random.default_rng(9), 300, 1)[0]
    expected = np.cumsum(0.5 * np.random.default_rng(9).standard_normal(300))
    np.testing.assert_allclose(drift, expected)


def test_drift_parts_can_be_omitted():
    drift = DriftNoise(ar=None, linear=LinearDriftNoise(scaling_factor=1.0),
                       dc=DCDriftNoise(scaling_factor=3.0))
    signal = drift.simulate(np.random.default_rng(0), 3, 1)
    np.testing.assert_allclose(signal[0], [3.0, 3.5, 4.0])


def test_full_drift_combines_parts():
    drift = DriftNoise(ar=ARDriftNoise(sigma=1.0), linear=LinearDriftNoise(), dc=DCDriftNoise(2.0))
    signal = drift.simulate(np.random.default_rng(3), 100, 1)[0]
    ar = ARDriftNoise(sigma=1.0).simulate(np.random.default_rng(3), 100, 1)[0]
    np.testing.assert_allclose(signal, ar + np.linspace(0, 1, 100) + 2.0)


def test_user_defined_signal_passthrough_and_padding():
    recorded = np.array([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])
    artifact = UserDefinedContinuousSignal(recorded)

    assert artifact.required_length() == 3
    signal = artifact.simulate(np.random.default_rng(0), 5, 2)
    np.testing.assert_array_equal(signal[:, :3], recorded)
    np.testing.assert_array_equal(signal[:, 3:], 0.0)


def test_href_straight_ahead():
    gaze = HREFCoordinates(np.zeros((2, 4))).gaze_vectors()
    np.testing.assert_allclose(gaze, np.tile([[0.0], [1.0], [0.0]], (1, 4)))


def test_href_vectors_are_unit_length():
    coords = np.random.default_rng(0).uniform(-5000, 5000, size=(2, 50))
    gaze = HREFCoordinates(coords).gaze_vectors()
    np.testing.assert_allclose(np.linalg.norm(gaze, axis=0), 1.0)


def test_eye_movement_crd(eye_headmodel):
    gaze = np.array([[1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0]])
    artifact = EyeMovement(GazeDirectionVectors(gaze), eye_headmodel, eye_model="crd")
    signal = artifact.simulate(np.random.default_rng(0), 3, 2)

    assert artifact.required_length() == 3
    np.testing.assert_allclose(signal, [[1.0, 0.0, 0.0], [0.0, 2.0, 0.0]])


def test_eye_movement_ensemble(eye_headmodel):
    gaze = np.array([[1.0], [0.0], [0.0]])
    artifact = EyeMovement(GazeDirectionVectors(gaze), eye_headmodel, eye_model="ensemble")
    signal = artifact.simulate(np.random.default_rng(0), 2, 2)
    # cornea + retina at the first sample, zero once the control signal ends
    np.testing.assert_allclose(signal, [[0.0, 0.0], [1.0, 0.0]])


def test_eye_movement_ensemble_retina_is_negative(eye_headmodel):
    # Gaze along z only reaches the retina source of channel 0
    gaze = np.array([[0.0], [0.0], [1.0]])
    artifact = EyeMovement(GazeDirectionVectors(gaze), eye_headmodel, eye_model="ensemble")
    signal = artifact.simulate(np.random.default_rng(0), 1, 2)
    np.testing.assert_allclose(signal, [[-1.0], [0.0]])


def test_eye_movement_unknown_model(eye_headmodel):
    artifact = EyeMovement(GazeDirectionVectors(np.ones((3, 2))), eye_headmodel, eye_model="nope")
    with pytest.raises(ConfigMismatchError):
        artifact.simulate(np.random.default_rng(0), 2, 2)


def test_control_signal_must_start_at_zero(eye_headmodel):
    artifact = EyeMovement(GazeDirectionVectors(np.ones((3, 2)), start=5), eye_headmodel)
    with pytest.raises(ControlSignalError):
        artifact.simulate(np.random.default_rng(0), 10, 2)
