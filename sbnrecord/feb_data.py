"""Raw front-end board data from the SBND CRT and its truth association."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

N_CH = 32


class FEBDataError(IndexError):
    """Raised when a SiPM index is outside the board's channels."""


def _check_sipm(sipm_id: int) -> None:
    if not 0 <= sipm_id < N_CH:
        raise FEBDataError("sipmID is out of limits.")


@dataclass
class FEBData:
    """Readout of one CRT module: flags, counters (ns) and 32 SiPM ADC values.

    ``coinc`` historically named the triggering SiPM; in data it holds the
    module's cable delay.
    """

    mac5: int = 0
    flags: int = 0
    ts0: int = 0
    ts1: int = 0
    unix_s: int = 0
    adcs: list[int] = field(default_factory=lambda: [0] * N_CH)
    coinc: int = 0

    def __post_init__(self) -> None:
        values = list(self.adcs)
        if len(values) != N_CH:
            raise FEBDataError(f"expected {N_CH} ADC values, got {len(values)}")
        self.adcs = values

    def adc(self, sipm_id: int) -> int:
        """Return the ADC counts of SiPM ``sipm_id`` (0-31)."""
        _check_sipm(sipm_id)
        return self.adcs[sipm_id]

    def set_adc(self, sipm_id: int, value: int) -> None:
        """Set the ADC counts of SiPM ``sipm_id`` (0-31)."""
        _check_sipm(sipm_id)
        self.adcs[sipm_id] = value

    @classmethod
    def _from_iterable(cls, values: Iterable[int]) -> FEBData:
        return cls(adcs=list(values))


@dataclass
class FEBTruthInfo:
    """SiPM channel associated with a simulated energy deposit."""

    channel: int = 0