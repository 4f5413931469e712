[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dmrstation"
version = "0.1.0"
description = "DMR network station building blocks: Homebrew repeater protocol, DMR error correction codes and AMBE frame handling"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "dmr",
    "ham radio",
    "amateur radio",
    "homebrew protocol",
    "ambe",
    "golay",
    "reed-solomon",
    "talkgroup",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Telecommunications Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Ham Radio",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dmrstation"]

[tool.hatch.build.targets.sdist]
include = ["dmrstation", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
