"""Characterisation of a CRT cluster as a point in space and time."""

from __future__ import annotations

from dataclasses import dataclass, field

from sbnrecord.geometry import Point


@dataclass(frozen=True)
class CRTSpacePoint:
    """A CRT space point; position in cm, times in ns."""

    pos: Point = field(default_factory=Point)
    err: Point = field(default_factory=Point)
    pe: float = 0.0
    ts0: float = 0.0
    ts0_err: float = 0.0
    ts1: float = 0.0
    ts1_err: float = 0.0
    complete: bool = False

    @classmethod
    def from_components(
        cls,
        x: float,
        x_err: float,
        y: float,
        y_err: float,
        z: float,
        z_err: float,
        pe: float,
        ts0: float,
        ts0_err: float,
        ts1: float,
        ts1_err: float,
        complete: bool,
    ) -> CRTSpacePoint:
        """Build a space point from each coordinate and its error."""
        return cls(
            pos=Point(x, y, z),
            err=Point(x_err, y_err, z_err),
            pe=pe,
            ts0=ts0,
            ts0_err=ts0_err,
            ts1=ts1,
            ts1_err=ts1_err,
            complete=complete,
        )

    def x(self) -> float:
        """Return the x coordinate."""
        return self.pos.x

    def x_err(self) -> float:
        """Return the error on the x coordinate."""
        return self.err.x

    def y(self) -> float:
        """Return the y coordinate."""
        return self.pos.y

    def y_err(self) -> float:
        """Return the error on the y coordinate."""
        return self.err.y

    def z(self) -> float:
        """Return the z coordinate."""
        return self.pos.z

    def z_err(self) -> float:
        """Return the error on the z coordinate."""
        return self.err.z