"""
Plots of simulated signals
"""

import logging
import os
from typing import List, Optional, Sequence

import numpy as np
import matplotlib.pyplot as plt


def plot_sources(
    signal: np.ndarray,
    per_source: List[np.ndarray],
    out_path: str,
    labels: Optional[Sequence[str]] = None,
    channel: int = 0,
    events: Optional[np.ndarray] = None
) -> None:
    """
    Plot the composite signal above each of its sources (one channel)

    Args:
        signal: Composite signal [channels x samples] or [samples]
        per_source: Per-source signals in the same layout
        out_path: Path of the saved figure
        labels: Optional title for each source
        channel: Channel to plot for multichannel signals
        events: Optional onset samples, drawn as vertical lines
    """
    def pick(x):
        x = np.asarray(x)
        return x if x.ndim == 1 else x[channel]

    n_rows = 1 + len(per_source)
    labels = list(labels) if labels is not None else [f"Source {i}" for i in range(len(per_source))]

    fig, axes = plt.subplots(n_rows, 1, figsize=(10, 2 * n_rows), sharex=True, squeeze=False)
    traces = [pick(signal)] + [pick(s) for s in per_source]
    titles = ["Composite"] + labels

    for ax, trace, title in zip(axes[:, 0], traces, titles):
        ax.plot(trace, linewidth=0.8)
        ax.set_title(title, fontsize=10)
        ax.set_ylabel("Amplitude")
        if events is not None:
            for latency in events:
                ax.axvline(latency, color="gray", alpha=0.3, linewidth=0.5)

    axes[-1, 0].set_xlabel("Time [samples]")
    fig.tight_layout()

    directory = os.path.dirname(out_path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    fig.savefig(out_path, dpi=150, bbox_inches='tight')
    plt.close(fig)

    logging.info(f"Source plot saved to: {out_path}")
