[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "blocktris"
version = "0.1.0"
description = "A terminal falling-block puzzle game with SRS wall kicks, a ghost piece, combos and a score log"
requires-python = ">=3.10"
dependencies = []
keywords = ["tetromino", "puzzle", "terminal", "game", "srs"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
blocktris = "blocktris.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["blocktris"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
