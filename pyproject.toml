[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wavesynth"
version = "0.1.0"
description = "Building blocks for a SoundFont synthesizer: MIDI file loading, SoundFont record readers, channel state, a low-pass filter, chorus and LFO."
requires-python = ">=3.10"
dependencies = []
keywords = ["midi", "soundfont", "sf2", "synthesizer", "audio", "dsp"]
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
    "Topic :: Multimedia :: Sound/Audio :: Sound Synthesis",
    "Topic :: Multimedia :: Sound/Audio :: MIDI",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wavesynth"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
