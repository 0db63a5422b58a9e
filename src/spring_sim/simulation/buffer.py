"""Rolling-window storage of sampled (time, value) pairs.

Each channel keeps only the samples inside a trailing window of simulated
time, so memory stays constant however long a run lasts.
"""
from __future__ import annotations

from collections import deque
from typing import Iterator

import numpy as np

from spring_sim.types.simulation import Sample

CHANNELS = ("displacement", "velocity", "acceleration", "total_energy")


class SampleSeries:
    """Time-ordered samples of one channel, bounded to ``window`` seconds."""

    def __init__(self, name: str, window: float) -> None:
        if window <= 0:
            raise ValueError(f"window must be positive, got {window}")
        self.name = name
        self.window = window
        self._samples: deque[Sample] = deque()

    def append(self, time: float, value: float) -> None:
        """Append a sample, then drop every sample older than ``time - window``."""
        if self._samples and time <= self._samples[-1].time:
            raise ValueError(
                f"{self.name}: sample time {time} is not after {self._samples[-1].time}"
            )
        self._samples.append(Sample(time=time, value=value))
        cutoff = time - self.window
        while self._samples[0].time < cutoff:
            self._samples.popleft()

    @property
    def latest(self) -> Sample | None:
        return self._samples[-1] if self._samples else None

    @property
    def oldest(self) -> Sample | None:
        return self._samples[0] if self._samples else None

    def times(self) -> np.ndarray:
        return np.array([s.time for s in self._samples], dtype=np.float64)

    def values(self) -> np.ndarray:
        return np.array([s.value for s in self._samples], dtype=np.float64)

    def __iter__(self) -> Iterator[Sample]:
        return iter(tuple(self._samples))

    def __len__(self) -> int:
        return len(self._samples)


class TimeSeriesBuffer:
    """The four sampled channels of a run: displacement, velocity, acceleration, energy."""

    def __init__(self, window: float = 15.0) -> None:
        self.window = window
        self._series = self._empty()

    def _empty(self) -> dict[str, SampleSeries]:
        return {name: SampleSeries(name, self.window) for name in CHANNELS}

    def append(
        self,
        time: float,
        displacement: float,
        velocity: float,
        acceleration: float,
        total_energy: float,
    ) -> None:
        """Record one sample on every channel at the same time stamp."""
        values = (displacement, velocity, acceleration, total_energy)
        for name, value in zip(CHANNELS, values):
            self._series[name].append(time, value)

    def clear(self) -> None:
        """Empty every channel at once."""
        self._series = self._empty()

    def channel(self, name: str) -> SampleSeries:
        if name not in self._series:
            raise KeyError(f"Unknown channel: {name}. Use one of {CHANNELS}.")
        return self._series[name]

    @property
    def displacement(self) -> SampleSeries:
        return self._series["displacement"]

    @property
    def velocity(self) -> SampleSeries:
        return self._series["velocity"]

    @property
    def acceleration(self) -> SampleSeries:
        return self._series["acceleration"]

    @property
    def total_energy(self) -> SampleSeries:
        return self._series["total_energy"]

    def as_arrays(self) -> dict[str, tuple[np.ndarray, np.ndarray]]:
        """Return {channel: (times, values)} as numpy arrays."""
        return {name: (s.times(), s.values()) for name, s in self._series.items()}

    def is_empty(self) -> bool:
        return all(len(s) == 0 for s in self._series.values())

    def __len__(self) -> int:
        """Number of samples per channel (all channels are appended together)."""
        return len(self._series["displacement"])
