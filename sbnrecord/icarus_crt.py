"""Single self-triggered hit of an ICARUS CRT front-end board."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

ADC_CHANNELS = 64


class CRTDataFlags(enum.IntFlag):
    """Flag bits stored in :attr:`CRTData.flags`."""

    TS0_PRESENT = 0x0001
    TS1_PRESENT = 0x0002
    TS0_REFERENCE = 0x0004
    TS1_REFERENCE = 0x0008


@dataclass
class CRTData:
    """A CRT board hit; timestamps are absolute Unix times in nanoseconds."""

    mac5: int = 0
    entry: int = 0
    ts0: int = 0
    ts1: int = 0
    adc: list[int] = field(default_factory=lambda: [0] * ADC_CHANNELS)
    flags: int = 0
    this_poll_start: int = 0
    last_poll_start: int = 0
    hits_in_poll: int = 0
    coinc: int = 0
    last_accepted_timestamp: int = 0
    lost_hits: int = 0

    def is_overflow_ts0(self) -> bool:
        """Whether the T0 counter was not restarted in time."""
        return not (self.flags & CRTDataFlags.TS0_PRESENT)

    def is_overflow_ts1(self) -> bool:
        """Whether the T1 counter was not restarted in time."""
        return not (self.flags & CRTDataFlags.TS1_PRESENT)

    def is_reference_ts0(self) -> bool:
        """Whether this hit is a T0 reference signal."""
        return bool(self.flags & CRTDataFlags.TS0_REFERENCE)

    def is_reference_ts1(self) -> bool:
        """Whether this hit is a T1 reference signal."""
        return bool(self.flags & CRTDataFlags.TS1_REFERENCE)