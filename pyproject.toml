[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dicecard"
version = "0.1.0"
description = "A five-dice scorecard game with a terminal player and a simple computer player, plus a star battle puzzle solver"
requires-python = ">=3.10"
dependencies = []
keywords = ["dice", "yahtzee", "scorecard", "game", "star battle", "puzzle"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dicecard = "dicecard.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dicecard"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
