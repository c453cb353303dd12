[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wavpeek"
version = "0.1.0"
description = "Inspect canonical RIFF/WAVE files and reshape their sample data"
requires-python = ">=3.10"
dependencies = []
keywords = ["wav", "wave", "riff", "audio", "pcm", "adpcm", "ima4"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Conversion",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wavpeek = "wavpeek.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["wavpeek"]

[tool.pytest.ini_options]
addopts = "-ra"
