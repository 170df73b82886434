[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ttydsp"
version = "0.1.0"
description = "Signal-processing blocks for a radioteletype terminal unit (biquad filters, AGC, mark/space threshold, Baudot loop receiver, AFSK keying) with models of its controller's peripherals."
requires-python = ">=3.10"
dependencies = []
keywords = ["rtty", "baudot", "afsk", "dsp", "biquad", "teletype", "ham radio"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Communications :: Ham Radio",
    "Topic :: Multimedia :: Sound/Audio :: Analysis",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ttydsp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
