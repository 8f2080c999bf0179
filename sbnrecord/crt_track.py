"""Track joining CRT space points across taggers."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from sbnrecord.crt_enums import CRTTagger
from sbnrecord.geometry import Point


@dataclass(frozen=True)
class CRTTrack:
    """A CRT track: fitted points at each tagger (cm) and averaged times (ns)."""

    points: tuple[Point, ...] = ()
    ts0: float = 0.0
    ts0_err: float = 0.0
    ts1: float = 0.0
    ts1_err: float = 0.0
    pe: float = 0.0
    tof: float = 0.0
    taggers: frozenset[CRTTagger] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        object.__setattr__(self, "points", tuple(self.points))
        object.__setattr__(self, "taggers", frozenset(self.taggers))

    @classmethod
    def from_endpoints(
        cls,
        start: Point,
        end: Point,
        ts0: float,
        ts0_err: float,
        ts1: float,
        ts1_err: float,
        pe: float,
        tof: float,
        taggers: Iterable[CRTTagger],
    ) -> CRTTrack:
        """Build a two-point track."""
        return cls((start, end), ts0, ts0_err, ts1, ts1_err, pe, tof, frozenset(taggers))

    def start(self) -> Point:
        """Return the first point; raises IndexError for an empty track."""
        return self.points[0]

    def end(self) -> Point:
        """Return the last point; raises IndexError for an empty track."""
        return self.points[-1]

    def _span(self) -> Point:
        return self.end() - self.start()

    def direction(self) -> Point:
        """Return the unit vector from start to end."""
        return self._span().unit()

    def length(self) -> float:
        """Return the distance from start to end."""
        return self._span().r()

    def theta(self) -> float:
        """Return the polar angle of the track."""
        return self._span().theta()

    def phi(self) -> float:
        """Return the azimuthal angle of the track."""
        return self._span().phi()

    def triple(self) -> bool:
        """Whether the track was built from exactly three taggers."""
        return len(self.taggers) == 3

    def used_tagger(self, tagger: CRTTagger) -> bool:
        """Whether ``tagger`` contributed to the track."""
        return tagger in self.taggers