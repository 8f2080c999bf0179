"""Two-SiPM hit on a single CRT strip."""

from __future__ import annotations

from dataclasses import dataclass

ADC_SATURATION = 4095


@dataclass(frozen=True)
class CRTStripHit:
    """A strip hit; position and error in cm, times in ns.

    When a saturation flag is not given it is derived from whether the
    matching ADC reads the saturation value.
    """

    channel: int = 0
    ts0: int = 0
    ts1: int = 0
    unix_s: int = 0
    pos: float = 0.0
    error: float = 0.0
    adc1: int = 0
    adc2: int = 0
    saturated1: bool | None = None
    saturated2: bool | None = None

    def __post_init__(self) -> None:
        if self.saturated1 is None:
            object.__setattr__(self, "saturated1", self.adc1 == ADC_SATURATION)
        if self.saturated2 is None:
            object.__setattr__(self, "saturated2", self.adc2 == ADC_SATURATION)