"""Cluster of CRT strip hits on one tagger."""

from __future__ import annotations

from dataclasses import dataclass

from sbnrecord.crt_enums import CoordSet, CRTTagger


@dataclass(frozen=True)
class CRTCluster:
    """A cluster of strip hits; times in ns, ``unix_s`` in seconds."""

    ts0: int = 0
    ts1: int = 0
    unix_s: int = 0
    n_hits: int = 0
    tagger: CRTTagger = CRTTagger.UNDEFINED
    composition: CoordSet = CoordSet.UNDEFINED