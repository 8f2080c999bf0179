import pytest

from sbnrecord.channel_roi import INVALID_CHANNEL_ID, ChannelROI, RegionsOfInterest


def test_default_channel_roi_is_empty_and_invalid():
    roi = ChannelROI()
    assert roi.channel == INVALID_CHANNEL_ID
    assert roi.n_signal() == 0
    assert roi.signal() == []


def test_signal_is_zero_padded():
    values = [4, -2, 7]
    regions = RegionsOfInterest(10)
    regions.add_range(2, values)
    roi = ChannelROI(regions, 5)
    assert roi.signal() == [0, 0] + values + [0] * 5
    assert roi.n_signal() == 10
    assert roi.channel == 5


def test_getitem_inside_and_outside_ranges():
    regions = RegionsOfInterest(8)
    regions.add_range(3, [11, 12])
    assert regions[3] == 11
    assert regions[4] == 12
    assert regions[0] == 0
    assert regions[7] == 0
    assert regions[-5] == 11


def test_getitem_out_of_range():
    regions = RegionsOfInterest(4)
    with pytest.raises(IndexError) as too_high:
        regions[4]
    with pytest.raises(IndexError) as too_low:
        regions[-5]
    assert too_high.type is IndexError
    assert too_low.type is IndexError
    assert len(regions) == 4
    assert regions[3] == 0


def test_adjacent_ranges_merge():
    regions = RegionsOfInterest(6)
    regions.add_range(0, [1, 2])
    regions.add_range(2, [3])
    assert regions.ranges() == [(0, [1, 2, 3])]


def test_overlapping_range_overwrites():
    regions = RegionsOfInterest(6)
    regions.add_range(1, [1, 1, 1])
    regions.add_range(2, [9])
    assert regions.ranges() == [(1, [1, 9, 1])]


def test_separate_ranges_sorted():
    regions = RegionsOfInterest(10)
    regions.add_range(6, [2])
    regions.add_range(1, [3])
    assert [begin for begin, _ in regions.ranges()] == [1, 6]


def test_range_extends_size():
    regions = RegionsOfInterest(2)
    regions.add_range(1, [5, 6, 7])
    assert len(regions) == 4
    assert list(regions) == [0, 5, 6, 7]


def test_negative_offset_rejected():
    regions = RegionsOfInterest(3)
    with pytest.raises(ValueError):
        regions.add_range(-1, [1])


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        RegionsOfInterest(-1)


def test_empty_range_changes_nothing():
    regions = RegionsOfInterest(3)
    regions.add_range(7, [])
    assert len(regions) == 3
    assert regions.ranges() == []


def test_ordering_by_channel():
    rois = [ChannelROI(channel=c) for c in (9, 2, 5)]
    assert [r.channel for r in sorted(rois)] == [2, 5, 9]
    assert ChannelROI(channel=1) < ChannelROI(channel=2)
    assert not ChannelROI(channel=2) < ChannelROI(channel=2)