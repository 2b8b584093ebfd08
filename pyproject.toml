[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "waterjug"
version = "0.1.0"
description = "Shortest solutions to the two-jug water puzzle by breadth-first search"
requires-python = ">=3.10"
dependencies = []
keywords = ["water jug", "puzzle", "bfs", "state space", "graph search"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
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
waterjug = "waterjug.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["waterjug"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
