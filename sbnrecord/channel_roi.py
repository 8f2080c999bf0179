"""Deconvolved signal of a TPC channel organised in regions of interest."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Iterable, Iterator

INVALID_CHANNEL_ID = 0xFFFFFFFF


class RegionsOfInterest:
    """A sparse sequence of samples: zero everywhere except inside ranges.

    The nominal size may extend beyond the last range. Adjacent or
    overlapping ranges are merged; newer values overwrite older ones.
    """

    def __init__(self, size: int = 0) -> None:
        if size < 0:
            raise ValueError(f"size must not be negative, got {size}")
        self._size = size
        self._ranges: list[tuple[int, list[int]]] = []

    def add_range(self, offset: int, values: Iterable[int]) -> None:
        """Store ``values`` starting at sample ``offset``."""
        if offset < 0:
            raise ValueError(f"offset must not be negative, got {offset}")
        new_values = list(values)
        if not new_values:
            return
        end = offset + len(new_values)

        kept: list[tuple[int, list[int]]] = []
        touching: list[tuple[int, list[int]]] = []
        for begin, data in self._ranges:
            if begin <= end and begin + len(data) >= offset:
                touching.append((begin, data))
            else:
                kept.append((begin, data))

        merged_begin = min([offset, *(begin for begin, _ in touching)])
        merged_end = max([end, *(begin + len(data) for begin, data in touching)])
        dense = [0] * (merged_end - merged_begin)
        for begin, data in touching:
            dense[begin - merged_begin:begin - merged_begin + len(data)] = data
        dense[offset - merged_begin:end - merged_begin] = new_values

        kept.append((merged_begin, dense))
        kept.sort(key=lambda item: item[0])
        self._ranges = kept
        self._size = max(self._size, end)

    def ranges(self) -> list[tuple[int, list[int]]]:
        """Return the regions as ``(first sample, values)`` pairs, sorted."""
        return [(begin, list(data)) for begin, data in self._ranges]

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        position = 0
        for begin, data in self._ranges:
            yield from (0 for _ in range(begin - position))
            yield from data
            position = begin + len(data)
        yield from (0 for _ in range(self._size - position))

    def __getitem__(self, index: int) -> int:
        if index < 0:
            index += self._size
        if not 0 <= index < self._size:
            raise IndexError("sample index out of range")
        where = bisect_right([begin for begin, _ in self._ranges], index) - 1
        if where >= 0:
            begin, data = self._ranges[where]
            if index < begin + len(data):
                return data[index - begin]
        return 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RegionsOfInterest):
            return NotImplemented
        return self._size == other._size and self._ranges == other._ranges

    def __repr__(self) -> str:
        return f"RegionsOfInterest(size={self._size}, ranges={self._ranges!r})"


class ChannelROI:
    """Regions of interest of the signal on one readout channel."""

    def __init__(
        self,
        signal_roi: RegionsOfInterest | None = None,
        channel: int = INVALID_CHANNEL_ID,
    ) -> None:
        self.signal_roi = signal_roi if signal_roi is not None else RegionsOfInterest()
        self.channel = channel

    def signal(self) -> list[int]:
        """Return the full zero-padded waveform."""
        return list(self.signal_roi)

    def n_signal(self) -> int:
        """Return the number of ticks covered by the channel."""
        return len(self.signal_roi)

    def __lt__(self, other: ChannelROI) -> bool:
        if not isinstance(other, ChannelROI):
            return NotImplemented
        return self.channel < other.channel

    def __repr__(self) -> str:
        return f"ChannelROI(channel={self.channel}, signal_roi={self.signal_roi!r})"