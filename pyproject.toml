[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sbnrecord"
version = "0.1.0"
description = "Data record types for short-baseline neutrino detector reconstruction, calibration and timing"
requires-python = ">=3.10"
dependencies = []
keywords = ["physics", "neutrino", "detector", "crt", "calibration", "tpc", "pmt"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sbnrecord"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
