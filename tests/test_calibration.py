import math

from sbnrecord.calibration import (
    HitInfo,
    MetaInfo,
    TrackHitInfo,
    TrackInfo,
    TrackTruth,
    TrueHit,
    TrueParticle,
    Vector3D,
    WireInfo,
)


def test_vector_defaults_are_nan():
    v = Vector3D()
    assert [math.isnan(c) for c in (v.x, v.y, v.z)] == [True, True, True]


def test_vector_values():
    v = Vector3D(1.0, 2.0, 3.0)
    assert (v.x, v.y, v.z) == (1.0, 2.0, 3.0)


def test_wire_info_defaults():
    w = WireInfo()
    assert w.wire == 0xFFFF
    assert w.tdc0 == -1
    assert w.adcs == []


def test_hit_info_defaults():
    h = HitInfo()
    assert h.integral == -1
    assert h.mult == 0xFFFF
    assert h.start == -1 and h.end == -1
    assert math.isnan(h.sp.x)


def test_track_hit_info_defaults():
    th = TrackHitInfo()
    assert th.pitch == -1 and th.dqdx == -1 and th.rr == -1
    assert th.ontraj is False and th.oncalo is False
    assert th.h.id == -1


def test_meta_info_defaults():
    m = MetaInfo()
    assert (m.run, m.evt, m.subrun, m.ifile, m.iproc) == (-1, -1, -1, -1, -1)


def test_true_hit_positions_zeroed():
    t = TrueHit()
    assert (t.p.x, t.p.y, t.p.z) == (0.0, 0.0, 0.0)
    assert (t.p_scecorr_width.x, t.p_scecorr_width.z) == (0.0, 0.0)
    assert t.ndep == 0 and t.itraj == -1


def test_true_particle_defaults():
    p = TrueParticle()
    assert math.isnan(p.gen_e)
    assert p.g4_id == -1 and p.pdg == -1
    assert p.contained is False
    assert p.truehits0 == [] and p.traj == []


def test_track_truth_defaults_nan():
    t = TrackTruth()
    assert [math.isnan(x) for x in (t.pur, t.eff, t.dep_e)] == [True, True, True]


def test_track_info_defaults():
    t = TrackInfo()
    assert t.hit_min_time_p0_tpc_e == -100000
    assert t.hit_max_time_p2_tpc_w == -100000
    assert t.selected == -1 and t.nprescale == -1
    assert t.clear_cosmic_muon is False


def test_track_info_lists_not_shared():
    a = TrackInfo()
    b = TrackInfo()
    a.hits0.append(TrackHitInfo())
    a.meta.run = 5
    assert b.hits0 == []
    assert b.meta.run == -1