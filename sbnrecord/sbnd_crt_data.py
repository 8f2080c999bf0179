"""Raw per-channel CRT readout for SBND."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CRTData:
    """One channel reading: counter values and ADC."""

    channel: int = 0
    t0: int = 0
    t1: int = 0
    adc: int = 0