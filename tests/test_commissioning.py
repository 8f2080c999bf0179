from sbnrecord.commissioning import MuonTrack, PMTTrigger, ToF


def test_tof_defaults_are_sentinels():
    tof = ToF()
    assert tof.tof == -9999 and tof.crt_time == -9999 and tof.pmt_time == -9999
    assert tof.crt_tagger == "N/A"
    assert (tof.crt_sp_id, tof.crt_trk_id, tof.pmt_hit_id, tof.pmt_flash_id, tof.flash_tpc_id) == (
        -9999,
        -9999,
        -9999,
        -9999,
        -9999,
    )
    assert tof.frm_trk is False and tof.frm_hit is False


def test_tof_keeps_values():
    tof = ToF(tof=12.5, frm_trk=True, crt_tagger="kTopHighTagger", crt_trk_id=3)
    assert tof.tof == 12.5
    assert tof.frm_trk is True
    assert tof.crt_tagger == "kTopHighTagger"
    assert tof.crt_trk_id == 3
    assert tof.pmt_hit_id == -9999


def test_pmt_trigger_lists_are_independent():
    a, b = PMTTrigger(), PMTTrigger()
    a.num_passed.append(4)
    assert a.num_passed == [4]
    assert b.num_passed == []


def test_pmt_trigger_values():
    trig = PMTTrigger([1, 5, 2], max_pmts=5)
    assert trig.max_pmts == max(trig.num_passed)


def test_muon_track_fields():
    track = MuonTrack(t0_us=-3, x1_pos=1.0, z2_pos=500.0, theta_xz=0.5, tpc=1, type=2)
    assert track.t0_us == -3
    assert (track.x1_pos, track.z2_pos) == (1.0, 500.0)
    assert track.theta_xz == 0.5
    assert (track.tpc, track.type) == (1, 2)
    assert track == MuonTrack(-3, 1.0, 0.0, 0.0, 0.0, 0.0, 500.0, 0.5, 0.0, 1, 2)