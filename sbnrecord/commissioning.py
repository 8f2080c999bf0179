"""Small records from SBND commissioning: muon tracks, PMT triggers, time of flight."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class MuonTrack:
    """A straight muon track through a TPC, with its endpoints in cm."""

    t0_us: int = 0
    x1_pos: float = 0.0
    y1_pos: float = 0.0
    z1_pos: float = 0.0
    x2_pos: float = 0.0
    y2_pos: float = 0.0
    z2_pos: float = 0.0
    theta_xz: float = 0.0
    theta_yz: float = 0.0
    tpc: int = 0
    type: int = 0


@dataclass
class PMTTrigger:
    """Number of PMTs passing threshold per time step, and their maximum."""

    num_passed: list[int] = field(default_factory=list)
    max_pmts: int = 0


@dataclass
class ToF:
    """Time of flight between a CRT and a PMT signal."""

    tof: float = -9999.0
    frm_trk: bool = False
    frm_hit: bool = False
    crt_time: float = -9999.0
    pmt_time: float = -9999.0
    crt_tagger: str = "N/A"
    crt_sp_id: int = -9999
    crt_trk_id: int = -9999
    pmt_hit_id: int = -9999
    pmt_flash_id: int = -9999
    flash_tpc_id: int = -9999