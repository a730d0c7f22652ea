from __future__ import annotations

"""
Training-curve plots for the (epoch, metric) history collected during fit.
"""

from pathlib import Path
from typing import Mapping, Sequence

import matplotlib.pyplot as plt


def plot_training_curve(
    history: Sequence[tuple[int, float]] | Mapping[str, Sequence[tuple[int, float]]],
    filename: Path,
    metric_name: str = "metric",
    title: str = "Training curve",
) -> Path:
    """
    Save a line plot of the reported metric against the epoch.

    history is either one list of (epoch, metric) pairs or a mapping of
    label -> pairs, drawn as one line each.
    """
    curves = history if isinstance(history, Mapping) else {metric_name: history}

    plt.figure(figsize=(8, 5))
    for label, points in curves.items():
        if not points:
            continue
        epochs, values = zip(*points)
        plt.plot(epochs, values, marker="o", lw=2, label=str(label))
    plt.xlabel("Epoch")
    plt.ylabel(metric_name)
    plt.title(title)
    plt.legend(loc="upper right")
    plt.grid(True)
    plt.tight_layout()

    filename = Path(filename)
    filename.parent.mkdir(parents=True, exist_ok=True)
    plt.savefig(filename)
    plt.close()
    return filename
