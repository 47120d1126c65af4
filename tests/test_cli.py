import pandas as pd
import pytest

from eeg_sim.cli.main import DemoConfig, build_simulation, main, validate_config
from eeg_sim.core.config import DEFAULT_CHANNELS


def test_demo_writes_signal_and_events(tmp_path):
    prefix = str(tmp_path / "sim")
    assert main(["--out", prefix, "--repeats", "2", "--noise", "white", "--seed", "3"]) == 0

    data = pd.read_csv(f"{prefix}_data.csv")
    events = pd.read_csv(f"{prefix}_events.csv")

    assert list(events.columns) == ["cond_A", "latency"]
    assert len(events) == 4
    assert events["latency"].is_monotonic_increasing
    assert list(data.columns) == ["sample", "ch0"]
    assert len(data) >= events["latency"].iloc[-1]


def test_demo_with_artifacts_and_plot(tmp_path):
    prefix = str(tmp_path / "sim")
    plot = tmp_path / "plots" / "sources.png"
    assert main(["--out", prefix, "--repeats", "1", "--powerline", "--drift",
                 "--plot", str(plot)]) == 0
    assert plot.exists()


def test_demo_multichannel(tmp_path):
    prefix = str(tmp_path / "sim")
    assert main(["--out", prefix, "--repeats", "1", "--multichannel"]) == 0

    data = pd.read_csv(f"{prefix}_data.csv")
    assert list(data.columns) == ["sample"] + DEFAULT_CHANNELS


def test_same_seed_same_output(tmp_path):
    a, b = str(tmp_path / "a"), str(tmp_path / "b")
    main(["--out", a, "--repeats", "3", "--seed", "7", "--drift"])
    main(["--out", b, "--repeats", "3", "--seed", "7", "--drift"])
    pd.testing.assert_frame_equal(pd.read_csv(f"{a}_data.csv"), pd.read_csv(f"{b}_data.csv"))


def test_powerline_above_nyquist_fails(tmp_path):
    assert main(["--out", str(tmp_path / "sim"), "--sfreq", "100", "--powerline"]) == 1
    assert not (tmp_path / "sim_data.csv").exists()


@pytest.mark.parametrize("changes", [
    {"sfreq": 0},
    {"n_repeats": -1},
    {"onset_offset": -2},
    {"noise": "brown"},
    {"noiselevel": -0.1},
])
def test_validate_config_rejects(changes):
    config = DemoConfig(**changes)
    with pytest.raises(ValueError):
        validate_config(config)


def test_build_simulation():
    simulation = build_simulation(DemoConfig(powerline=True, drift=True, n_repeats=4))
    assert simulation.design.size() == 8
    assert len(simulation.components) == 1
    assert [type(a).__name__ for a in simulation.artifacts] == ["PowerLineNoise", "DriftNoise"]
