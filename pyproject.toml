[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "celtkit"
version = "0.1.0"
description = "Container helpers for CELT audio tools: WAV headers, Ogg Skeleton packets, Vorbis-style comments and PCM framing"
requires-python = ">=3.10"
dependencies = []
keywords = ["celt", "ogg", "skeleton", "wav", "pcm", "vorbis-comment"]
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
    "Topic :: Multimedia :: Sound/Audio :: Conversion",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["celtkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
