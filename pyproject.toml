[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "soundsource"
version = "0.1.0"
description = "Composable audio sample sources and filters built on Python iterators"
requires-python = ">=3.10"
dependencies = []
keywords = ["audio", "sound", "samples", "dsp", "filters", "low-pass", "spatial"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["soundsource"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
