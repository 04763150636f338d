[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "additivesynth"
version = "0.1.0"
description = "An additive synthesizer played over MIDI, with sliders for its ADSR envelope and harmonic levels"
requires-python = ">=3.10"
keywords = ["synthesizer", "additive synthesis", "midi", "audio", "adsr", "sine"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Sound Synthesis",
    "Topic :: Multimedia :: Sound/Audio :: MIDI",
]
dependencies = [
    "mido",
    "numpy",
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
additivesynth = "additivesynth.view:main"

[tool.hatch.build.targets.wheel]
packages = ["additivesynth"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
