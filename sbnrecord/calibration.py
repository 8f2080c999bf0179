"""Records produced by the track calorimetry skimmer used for calibration."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

_NAN = math.nan
_INVALID_U16 = 0xFFFF


@dataclass
class Vector3D:
    """A point or direction in 3D space; every component is NaN until set."""

    x: float = _NAN
    y: float = _NAN
    z: float = _NAN


def _zero_vector() -> Vector3D:
    return Vector3D(0.0, 0.0, 0.0)


@dataclass
class WireInfo:
    """Raw waveform of one wire read out around a track."""

    wire: int = _INVALID_U16
    plane: int = _INVALID_U16
    tpc: int = _INVALID_U16
    channel: int = _INVALID_U16
    tdc0: int = -1
    adcs: list[int] = field(default_factory=list)


@dataclass
class HitTruth:
    """True energy and charge associated with a reconstructed hit."""

    e: float = 0.0
    nelec: float = 0.0


@dataclass
class HitInfo:
    """A reconstructed hit."""

    integral: float = -1.0
    sumadc: float = -1.0
    width: float = -1.0
    sp: Vector3D = field(default_factory=Vector3D)
    time: float = -1.0
    id: int = -1
    channel: int = _INVALID_U16
    wire: int = _INVALID_U16
    plane: int = _INVALID_U16
    tpc: int = _INVALID_U16
    mult: int = _INVALID_U16
    start: int = -1
    end: int = -1
    has_sp: bool = False
    truth: HitTruth = field(default_factory=HitTruth)


@dataclass
class TrackHitInfo:
    """A hit together with the track quantities computed at its location."""

    h: HitInfo = field(default_factory=HitInfo)
    pitch: float = -1.0
    dqdx: float = -1.0
    rr: float = -1.0
    tp: Vector3D = field(default_factory=Vector3D)
    dir: Vector3D = field(default_factory=Vector3D)
    i_snippet: int = _INVALID_U16
    ontraj: bool = False
    oncalo: bool = False


@dataclass
class MetaInfo:
    """Event bookkeeping attached to a track."""

    run: int = -1
    evt: int = -1
    subrun: int = -1
    time: int = 0
    ifile: int = -1
    iproc: int = -1


@dataclass
class TrueHit:
    """A true energy deposition grouped as a hit on one wire."""

    cryo: int = -1
    tpc: int = -1
    plane: int = -1
    wire: int = -1
    channel: int = -1
    ndep: int = 0
    nelec: float = 0.0
    e: float = 0.0
    pitch: float = 0.0
    pitch_sce: float = 0.0
    rr: float = 0.0
    itraj: int = -1
    p: Vector3D = field(default_factory=_zero_vector)
    p_scecorr: Vector3D = field(default_factory=_zero_vector)
    p_width: Vector3D = field(default_factory=lambda: Vector3D(0.0, 0.0, _NAN))
    p_scecorr_width: Vector3D = field(default_factory=_zero_vector)
    time: float = 0.0
    tdrift: float = 0.0


@dataclass
class TrueParticle:
    """Truth information about a simulated particle."""

    plane0_vis_e: float = _NAN
    plane1_vis_e: float = _NAN
    plane2_vis_e: float = _NAN
    gen_e: float = _NAN
    start_e: float = _NAN
    end_e: float = _NAN
    gen_t: float = _NAN
    start_t: float = _NAN
    end_t: float = _NAN
    length: float = _NAN
    plane0_nhit: int = 0
    plane1_nhit: int = 0
    plane2_nhit: int = 0
    genp: Vector3D = field(default_factory=Vector3D)
    startp: Vector3D = field(default_factory=Vector3D)
    endp: Vector3D = field(default_factory=Vector3D)
    gen: Vector3D = field(default_factory=Vector3D)
    start: Vector3D = field(default_factory=Vector3D)
    end: Vector3D = field(default_factory=Vector3D)
    wallin: int = -1
    wallout: int = -1
    cont_tpc: bool = False
    crosses_tpc: bool = False
    contained: bool = False
    pdg: int = -1
    g4_id: int = -1
    parent: int = -1
    start_process: int = -1
    end_process: int = -1
    truehits0: list[TrueHit] = field(default_factory=list)
    truehits1: list[TrueHit] = field(default_factory=list)
    truehits2: list[TrueHit] = field(default_factory=list)
    traj: list[Vector3D] = field(default_factory=list)
    traj_sce: list[Vector3D] = field(default_factory=list)


@dataclass
class TrackTruth:
    """Truth matching of a reconstructed track."""

    p: TrueParticle = field(default_factory=TrueParticle)
    michel: TrueParticle = field(default_factory=TrueParticle)
    pur: float = _NAN
    eff: float = _NAN
    dep_e: float = _NAN


@dataclass
class TrackInfo:
    """Everything the skimmer stores about one reconstructed track."""

    meta: MetaInfo = field(default_factory=MetaInfo)
    hits0: list[TrackHitInfo] = field(default_factory=list)
    hits1: list[TrackHitInfo] = field(default_factory=list)
    hits2: list[TrackHitInfo] = field(default_factory=list)
    wires0: list[WireInfo] = field(default_factory=list)
    wires1: list[WireInfo] = field(default_factory=list)
    wires2: list[WireInfo] = field(default_factory=list)
    t0: float = -1.0
    t0_crt: float = -1.0
    whicht0: int = -1
    id: int = -1
    cryostat: int = -1
    clear_cosmic_muon: bool = False
    start: Vector3D = field(default_factory=Vector3D)
    end: Vector3D = field(default_factory=Vector3D)
    dir: Vector3D = field(default_factory=Vector3D)
    length: float = -1.0
    hit_min_time_p0_tpc_e: float = -100000.0
    hit_max_time_p0_tpc_e: float = -100000.0
    hit_min_time_p1_tpc_e: float = -100000.0
    hit_max_time_p1_tpc_e: float = -100000.0
    hit_min_time_p2_tpc_e: float = -100000.0
    hit_max_time_p2_tpc_e: float = -100000.0
    hit_min_time_p0_tpc_w: float = -100000.0
    hit_max_time_p0_tpc_w: float = -100000.0
    hit_min_time_p1_tpc_w: float = -100000.0
    hit_max_time_p1_tpc_w: float = -100000.0
    hit_min_time_p2_tpc_w: float = -100000.0
    hit_max_time_p2_tpc_w: float = -100000.0
    const_fit_c: float = -1.0
    const_fit_residuals: float = -1.0
    exp_fit_a: float = -1.0
    exp_fit_r: float = -1.0
    exp_fit_residuals: float = -1.0
    n_fit_point: int = -1
    selected: int = -1
    nprescale: int = -1
    daughter_pdg: list[int] = field(default_factory=list)
    daughter_nsp: list[int] = field(default_factory=list)
    daughter_sp_toend_dist: list[float] = field(default_factory=list)
    tracks_near_end_dist: list[float] = field(default_factory=list)
    tracks_near_end_costh: list[float] = field(default_factory=list)
    tracks_near_start_dist: list[float] = field(default_factory=list)
    tracks_near_start_costh: list[float] = field(default_factory=list)
    endhits: list[HitInfo] = field(default_factory=list)
    truth: TrackTruth = field(default_factory=TrackTruth)