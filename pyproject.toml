[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "soundblocks"
version = "0.1.0"
description = "Sample-by-sample audio building blocks: filters, envelopes, effects, noise sources and drum voices."
requires-python = ">=3.10"
dependencies = []
keywords = ["audio", "dsp", "synthesis", "filter", "envelope", "drums", "effects"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Sound Synthesis",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["soundblocks"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
