"""
Main CLI entry point for EEG simulation

This module provides a command-line interface that runs a demo simulation
(a two-level design evoking a P100-like response, with configurable noise
and artifacts) and writes the signal and event table to CSV files.
"""

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import List, Optional

import numpy as np
import pandas as pd

from ..artifacts.artifacts import DriftNoise, PowerLineNoise
from ..components.basis import p100
from ..components.components import LinearModelComponent, MultichannelComponent
from ..core.config import POWERLINE_BASE_FREQ
from ..core.data_types import Simulation
from ..design.designs import RepeatDesign, SingleSubjectDesign
from ..noise.noise import AutoRegressiveNoise, NoNoise, PinkNoise, RedNoise, WhiteNoise
from ..onset.onsets import UniformOnset
from ..simulation.compositor import simulate
from ..utils.logging_setup import setup_logging

NOISE_TYPES = {
    "none": NoNoise,
    "white": WhiteNoise,
    "pink": PinkNoise,
    "red": RedNoise,
    "ar": AutoRegressiveNoise,
}


@dataclass
class DemoConfig:
    """
    Parameters of the demo simulation

    - sfreq: sampling rate of the basis and the power line artifact (Hz)
    - n_repeats: how often the two-level design is repeated
    - onset_width/onset_offset: uniform inter-onset distances (samples)
    - noise/noiselevel: background noise type and scaling
    - powerline/drift: add the respective artifact
    - multichannel: project the response through a dipole head model
    """
    sfreq: float = 500.0
    n_repeats: int = 10
    seed: int = 1
    onset_width: int = 100
    onset_offset: int = 20
    noise: str = "pink"
    noiselevel: float = 0.2
    powerline: bool = False
    powerline_freq: float = POWERLINE_BASE_FREQ
    drift: bool = False
    multichannel: bool = False
    source_label: str = "Left Postcentral Gyrus"


def validate_config(config: DemoConfig) -> None:
    """
    Validate demo parameters for common mistakes

    Raises:
        ValueError: If a parameter is invalid
    """
    if config.sfreq <= 0:
        raise ValueError(f"Sampling rate must be positive, got {config.sfreq}")

    if config.n_repeats < 0:
        raise ValueError(f"Repeats must be non-negative, got {config.n_repeats}")

    if config.onset_width < 0 or config.onset_offset < 0:
        raise ValueError(f"Onset width/offset must be non-negative, got "
                         f"{config.onset_width}/{config.onset_offset}")

    if config.noise not in NOISE_TYPES:
        raise ValueError(f"Noise must be one of {sorted(NOISE_TYPES)}, got '{config.noise}'")

    if config.noiselevel < 0:
        raise ValueError(f"Noise level must be non-negative, got {config.noiselevel}")

    if config.powerline and config.powerline_freq >= config.sfreq / 2:
        raise ValueError(f"Power line frequency ({config.powerline_freq}) exceeds Nyquist ({config.sfreq / 2})")


def build_simulation(config: DemoConfig) -> Simulation:
    """Assemble the demo Simulation from a configuration"""
    design = RepeatDesign(
        SingleSubjectDesign(conditions={"cond_A": ["level_A", "level_B"]}),
        config.n_repeats,
    )
    component = LinearModelComponent(
        basis=p100(config.sfreq),
        formula="0 ~ 1 + cond_A",
        beta=(1.0, 0.5),
    )
    if config.multichannel:
        # mne is slow to import; only load it for the head model
        from ..headmodel.montage import make_dipole_headmodel
        component = MultichannelComponent(component, (make_dipole_headmodel(), config.source_label))

    artifacts = []
    if config.powerline:
        artifacts.append(PowerLineNoise(base_freq=config.powerline_freq, sampling_rate=config.sfreq))
    if config.drift:
        artifacts.append(DriftNoise())

    return Simulation(
        design=design,
        components=component,
        onset=UniformOnset(width=config.onset_width, offset=config.onset_offset),
        noise=NOISE_TYPES[config.noise](noiselevel=config.noiselevel),
        artifacts=tuple(artifacts),
    )


def save_results(signal: np.ndarray, events: pd.DataFrame, prefix: str,
                 ch_names: Optional[List[str]] = None) -> None:
    """Write ``<prefix>_data.csv`` (samples x channels) and ``<prefix>_events.csv``"""
    data = np.atleast_2d(signal)
    if ch_names is None or len(ch_names) != data.shape[0]:
        ch_names = [f"ch{i}" for i in range(data.shape[0])]

    pd.DataFrame(data.T, columns=ch_names).to_csv(f"{prefix}_data.csv", index_label="sample")
    events.to_csv(f"{prefix}_events.csv", index=False)
    logging.info(f"Saved {data.shape[1]} samples to {prefix}_data.csv, "
                 f"{len(events)} events to {prefix}_events.csv")


def create_parser() -> argparse.ArgumentParser:
    """Create command line argument parser"""
    defaults = DemoConfig()
    parser = argparse.ArgumentParser(
        description="EEG Sim - Simulate continuous EEG with overlapping responses and artifacts",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Single-channel simulation with pink noise
  python -m eeg_sim --out simulated

  # 19-channel simulation with power line and drift artifacts
  python -m eeg_sim --multichannel --powerline --drift --plot simulated.png
        """
    )

    parser.add_argument("--out", default="simulated",
                        help="Output file prefix (default: simulated)")
    parser.add_argument("--seed", type=int, default=defaults.seed,
                        help=f"Random seed (default: {defaults.seed})")
    parser.add_argument("--sfreq", type=float, default=defaults.sfreq,
                        help=f"Sampling frequency (default: {defaults.sfreq})")
    parser.add_argument("--repeats", type=int, default=defaults.n_repeats,
                        help=f"Design repetitions (default: {defaults.n_repeats})")

    # Onsets
    parser.add_argument("--onset-width", type=int, default=defaults.onset_width,
                        help=f"Uniform onset width in samples (default: {defaults.onset_width})")
    parser.add_argument("--onset-offset", type=int, default=defaults.onset_offset,
                        help=f"Minimum onset distance in samples (default: {defaults.onset_offset})")

    # Noise and artifacts
    parser.add_argument("--noise", choices=sorted(NOISE_TYPES), default=defaults.noise,
                        help=f"Background noise (default: {defaults.noise})")
    parser.add_argument("--noiselevel", type=float, default=defaults.noiselevel,
                        help=f"Noise scaling (default: {defaults.noiselevel})")
    parser.add_argument("--powerline", action="store_true",
                        help="Add power line interference")
    parser.add_argument("--powerline-freq", type=float, choices=[50.0, 60.0], default=POWERLINE_BASE_FREQ,
                        help=f"Power line frequency (default: {POWERLINE_BASE_FREQ})")
    parser.add_argument("--drift", action="store_true",
                        help="Add AR, linear and DC drift")
    parser.add_argument("--multichannel", action="store_true",
                        help="Project the response through a dipole head model")

    parser.add_argument("--plot", help="Save a plot of the composite and its sources to this path")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable verbose logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    config = DemoConfig(
        sfreq=args.sfreq,
        n_repeats=args.repeats,
        seed=args.seed,
        onset_width=args.onset_width,
        onset_offset=args.onset_offset,
        noise=args.noise,
        noiselevel=args.noiselevel,
        powerline=args.powerline,
        powerline_freq=args.powerline_freq,
        drift=args.drift,
        multichannel=args.multichannel,
    )

    try:
        validate_config(config)
        simulation = build_simulation(config)
        signal, events, per_source = simulate(np.random.default_rng(config.seed), simulation)

        ch_names = None
        if config.multichannel:
            ch_names = simulation.components[0].projection[0].channel_names
        save_results(signal, events, args.out, ch_names)

        if args.plot:
            from ..utils.plotting import plot_sources
            labels = ["Response"] + [type(s).__name__ for s in
                                     ([simulation.noise] + list(simulation.artifacts))]
            plot_sources(signal, per_source, args.plot, labels, events=events["latency"].to_numpy())

    except (ValueError, KeyError) as e:
        logging.error(f"Simulation failed: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
