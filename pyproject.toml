[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vsrg"
version = "0.1.0"
description = "A vertical scrolling rhythm game with a BMS chart parser and a small sprite engine"
requires-python = ">=3.10"
keywords = ["rhythm game", "bms", "vsrg", "pygame", "sprites"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
vsrg = "vsrg.game:main"

[tool.hatch.build.targets.wheel]
packages = ["vsrg"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
