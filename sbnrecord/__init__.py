"""Record types for short-baseline neutrino detector data: CRT, TPC, PMT, timing and calibration."""

__version__ = "0.1.0"