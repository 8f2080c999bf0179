"""Baseline value of a PMT waveform."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class WaveformBaseline:
    """A waveform baseline, kept as a floating point value."""

    baseline: float = 0.0

    def __call__(self) -> float:
        """Return the baseline value."""
        return self.baseline

    def __str__(self) -> str:
        return format(self.baseline, "g")