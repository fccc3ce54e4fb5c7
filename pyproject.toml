[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "puzzlepaths"
version = "0.1.0"
description = "Boggle word finder and grid maze path solver"
requires-python = ">=3.10"
dependencies = []
keywords = ["boggle", "trie", "maze", "path-finding", "puzzle", "bfs", "backtracking"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
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
puzzlepaths-boggle = "puzzlepaths.boggle:main"
puzzlepaths-maze = "puzzlepaths.tracker:main"

[tool.hatch.build.targets.wheel]
packages = ["puzzlepaths"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
