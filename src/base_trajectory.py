import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.axes import Axes

from .errors import InvalidTimesError

DEFAULT_SAMPLING = 1e-3
DEFAULT_NAME = "SmoothTrajectory"

CHANNEL_LABELS = (
    ("Position", ""),
    ("Velocity", "/s"),
    ("Acceleration", "/s^2"),
    ("Jerk", "/s^3"),
    ("Snap", "/s^4"),
)


@dataclass(kw_only=True)
class BaseTrajectoryConfig:
    transition: float = 1.0  # Transition time [s]
    sampling: float = DEFAULT_SAMPLING  # Step of the default time grid [s]
    name: str = DEFAULT_NAME

    # CLI-specific arguments (shared across all trajectories)
    show_plot: bool = False  # Show plot window (default: hidden)
    plot_path: Path | None = None  # Path to save plot image
    json_path: Path | None = None  # Path to save trajectory JSON


def default_time_grid(transition: float, sampling: float = DEFAULT_SAMPLING) -> np.ndarray:
    """Samples from 0 to ``transition`` spaced by roughly ``sampling``.

    The last sample is exactly ``transition``.
    """
    transition = float(transition)
    sampling = float(sampling)
    if not np.isfinite(transition) or transition <= 0.0:
        raise InvalidTimesError(f"Transition time must be positive and finite, got {transition}")
    if not np.isfinite(sampling) or sampling <= 0.0:
        raise InvalidTimesError(f"Sampling step must be positive and finite, got {sampling}")

    num_intervals = max(1, int(round(transition / sampling)))
    time_array = np.linspace(0.0, transition, num_intervals + 1)
    time_array[-1] = transition
    return time_array


def channel_label(index: int) -> tuple[str, str]:
    """Title and unit suffix for the ``index``-th time derivative."""
    if index < len(CHANNEL_LABELS):
        return CHANNEL_LABELS[index]
    return f"Derivative {index}", f"/s^{index}"


class BaseTrajectory(ABC):
    def __init__(self, cfg: BaseTrajectoryConfig, *args, **kwargs):
        self.transition = float(cfg.transition)
        self.sampling = float(cfg.sampling)
        self.name = cfg.name

        self.time_array = default_time_grid(self.transition, self.sampling)
        self.time_steps = len(self.time_array)

    def write_to_json(self, channels: list[np.ndarray], json_path="trajectory.json"):
        """
        Save the trajectory to a JSON file.
        Structure:
        {
            "name": str,
            "transition": float,
            "sampling": float,
            "time": [float, ...],
            "frames": [
                [[pos...], [vel...], [acc...], ...],
                ...
            ]
        }
        """
        frames = []
        for i in range(len(self.time_array)):
            frames.append([np.atleast_1d(channel[i]).tolist() for channel in channels])

        data = {
            "name": self.name,
            "transition": self.transition,
            "sampling": self.sampling,
            "time": self.time_array.tolist(),
            "frames": frames,
        }

        Path(json_path).parent.mkdir(parents=True, exist_ok=True)
        with open(json_path, "w") as f:
            json.dump(data, f, indent=4)

        print(f"Trajectory JSON saved to {json_path}")

    def plot(self, channels: list[np.ndarray], show: bool = False, plot_path: str | Path | None = None):
        """Plot every channel on its own axis, sharing the time axis."""
        fig, axes = plt.subplots(len(channels), 1, figsize=(10, 4 * len(channels)), sharex=True, squeeze=False)

        for k, (ax, data) in enumerate(zip(axes[:, 0], channels)):
            title, unit = channel_label(k)
            self._plot_single_ax(ax, data, f"{self.name}: {title}", "Time [s]", f"{title} [unit{unit}]")

        plt.tight_layout()

        if plot_path:
            Path(plot_path).parent.mkdir(parents=True, exist_ok=True)
            fig.savefig(plot_path)
            print(f"Plot saved to {plot_path}")

        if show:
            if plt.get_backend().lower() == "agg":
                print("\n[WARNING] Cannot show plot: no interactive matplotlib backend found.")
                print("Please specify a file path with '--plot-path' to save the plot instead.\n")
            else:
                plt.show()

        plt.close(fig)

    def _plot_single_ax(self, ax: Axes, data: np.ndarray, title: str, xlabel: str, ylabel: str):
        for j, d in enumerate(np.atleast_2d(data.T)):
            ax.plot(self.time_array, d, label=f"Axis {j + 1}")

        ax.set_xlabel(xlabel)
        ax.set_ylabel(ylabel)
        ax.set_title(title)
        ax.grid(True)
        ax.legend(loc="best")

    @abstractmethod
    def _generate(self) -> list[np.ndarray]:
        """To be implemented in each child class"""
        pass

    def generate(self, show_plot: bool = False, plot_path=None, json_path=None) -> list[np.ndarray]:
        channels = self._generate()

        if json_path is not None:
            self.write_to_json(channels, json_path)

        if show_plot or plot_path is not None:
            self.plot(channels, show=show_plot, plot_path=plot_path)

        return channels
