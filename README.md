# sbnrecord

Plain Python record types for the data produced by short-baseline neutrino
detectors. It covers the following:

- cosmic-ray tagger (CRT) hits, clusters, space points and tracks
- front-end board readouts
- DAQ timestamps
- TPC regions of interest
- PMT waveform baselines
- the per-track records used for calorimetry calibration

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

- `sbnrecord.calibration`: the records written by the track calorimetry
  skimmer. These are `Vector3D`, `WireInfo`, `HitTruth`, `HitInfo`,
  `TrackHitInfo`, `MetaInfo`, `TrueHit`, `TrueParticle`, `TrackTruth` and
  `TrackInfo`. They are dataclasses. Fields that are not yet known default to
  NaN, `-1` or `0xFFFF`, depending on the field.
- `sbnrecord.icarus_crt`: `CRTDataFlags`, an `IntFlag`, and the ICARUS
  `CRTData` board hit. The hit has 64 ADC values and these methods:
  - `is_overflow_ts0()`
  - `is_overflow_ts1()`
  - `is_reference_ts0()`
  - `is_reference_ts1()`
- `sbnrecord.waveform_baseline`: `WaveformBaseline`. Calling the object
  returns its value. `str()` formats the value with `"g"`.
- `sbnrecord.channel_roi`: `RegionsOfInterest` and `ChannelROI`.
  - `RegionsOfInterest` is a sparse sequence of samples. Every sample is zero
    except inside the ranges added with `add_range()`. Ranges that overlap or
    touch are merged, and newer values overwrite older ones.
  - `ChannelROI` holds the signal of one channel. `signal()` returns the full
    zero-padded waveform and `n_signal()` returns its length. Channels sort by
    channel number.
- `sbnrecord.crt_enums`: `CRTTagger` and the bit-flag `CoordSet`.
- `sbnrecord.crt_cluster`: `CRTCluster`.
- `sbnrecord.sbnd_crt_data`: the SBND `CRTData`.
- `sbnrecord.crt_strip_hit`: `CRTStripHit`. When a saturation flag is not
  given, it is set from whether the matching ADC reads 4095.
- `sbnrecord.geometry`: `Point`, a 3D point and vector. It supports `+` and
  `-`, and has `r()`, `theta()`, `phi()` and `unit()`.
- `sbnrecord.crt_space_point`: `CRTSpacePoint`. It can be built from `Point`
  values or with `from_components()`.
- `sbnrecord.crt_track`: `CRTTrack`. It gives the track's start, end,
  direction, length and angles, and the taggers it used (`triple()`,
  `used_tagger()`).
- `sbnrecord.feb_data`: `FEBData`, `FEBTruthInfo` and `FEBDataError`.
  - `FEBData` holds 32 SiPM ADC values.
  - An SiPM index outside 0 to 31 raises `FEBDataError`, which is an
    `IndexError`.
  - An ADC list of the wrong length also raises `FEBDataError`.
- `sbnrecord.daq_timestamp`: `DAQTimestamp`. Its `name` may be given as a raw
  8-byte value. Each byte, padding included, becomes one character.
- `sbnrecord.commissioning`: `MuonTrack`, `PMTTrigger` and `ToF`.

## Examples

Build a CRT track and query it:

```python
from sbnrecord.geometry import Point
from sbnrecord.crt_enums import CRTTagger, CoordSet
from sbnrecord.crt_track import CRTTrack

track = CRTTrack.from_endpoints(
    Point(0.0, 0.0, 0.0), Point(0.0, 3.0, 4.0),
    ts0=10.0, ts0_err=1.0, ts1=20.0, ts1_err=1.0,
    pe=120.0, tof=5.0,
    taggers={CRTTagger.SOUTH, CRTTagger.NORTH},
)
track.length()                          # 5.0
track.used_tagger(CRTTagger.NORTH)      # True
track.triple()                          # False
(CoordSet.X | CoordSet.Y) == CoordSet.XY  # True
```

Expand a channel's regions of interest into a full waveform:

```python
from sbnrecord.channel_roi import ChannelROI, RegionsOfInterest

roi = RegionsOfInterest(8)
roi.add_range(2, [5, 6])
channel = ChannelROI(roi, 7)
channel.signal()     # [0, 0, 5, 6, 0, 0, 0, 0]
channel.n_signal()   # 8
```

Read and write front-end board ADC values:

```python
from sbnrecord.feb_data import FEBData

feb = FEBData()
feb.set_adc(3, 1500)
feb.adc(3)    # 1500
feb.adc(32)   # raises FEBDataError
```

## What it does not do

The records live in memory only. The package does not read or write data
files, and it does not serialise records to any storage format. It does not
run reconstruction, calibration or simulation. It only describes the data
that those steps produce.