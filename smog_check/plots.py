"""
Figures for training diagnostics.
"""

from pathlib import Path
from typing import Sequence

import matplotlib.pyplot as plt
import numpy as np


def plot_cost_history(cost_history: Sequence[float], filename: Path) -> Path:
    """Save a line chart of cross-entropy per epoch; non-finite costs show as gaps."""
    costs = np.asarray(cost_history, dtype=float)
    costs = np.where(np.isfinite(costs), costs, np.nan)
    iterations = np.arange(1, len(costs) + 1)

    filename = Path(filename)
    filename.parent.mkdir(parents=True, exist_ok=True)

    plt.figure(figsize=(8, 6))
    plt.plot(iterations, costs, color="darkorange", lw=2)
    plt.xlabel("No of Iterations #")
    plt.ylabel("Cost")
    plt.title("Cost History")
    plt.grid(True)
    plt.tight_layout()
    plt.savefig(filename)
    plt.close()
    return filename
