[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "renju"
version = "0.2.0"
description = "Five-in-a-row board game for the terminal, with a simple computer opponent"
requires-python = ">=3.10"
dependencies = []
keywords = ["renju", "gomoku", "five-in-a-row", "board game", "console"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Russian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
renju = "renju.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["renju"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
