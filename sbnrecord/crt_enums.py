"""Enumerations shared by the SBND CRT records."""

from __future__ import annotations

import enum


class CRTTagger(enum.IntEnum):
    """One of the seven SBND CRT taggers."""

    UNDEFINED = -1
    BOTTOM = 0
    SOUTH = 1
    NORTH = 2
    WEST = 3
    EAST = 4
    TOP_LOW = 5
    TOP_HIGH = 6

    UPSTREAM = SOUTH
    DOWNSTREAM = NORTH


class CoordSet(enum.IntFlag):
    """Set of coordinate axes, combinable with ``|`` and ``&``."""

    UNDEFINED = 0
    X = 1
    Y = 2
    Z = 4
    XY = 3
    XZ = 5
    YZ = 6
    XYZ = 7

    THREE_D = XYZ