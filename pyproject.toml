[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "slidepuzzle"
version = "0.1.0"
description = "Interactive sliding tile puzzle for the terminal, with a breadth-first solver"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzle", "sliding-puzzle", "15-puzzle", "8-puzzle", "game", "bfs", "solver"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
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
slidepuzzle = "slidepuzzle.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["slidepuzzle"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
