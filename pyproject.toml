[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "roadgraph"
version = "0.1.0"
description = "Load a road network graph, measure its extent and compute hop counts and shortest weighted distances between nodes"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "road network", "shortest path", "dijkstra", "bfs", "gis"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: GIS",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
roadgraph = "roadgraph.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["roadgraph"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
