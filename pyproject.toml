[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "graphessentials"
version = "2.0.0"
description = "Sparse graph formats, frontiers, operators and reference graph algorithms in pure Python"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graph",
    "sparse",
    "csr",
    "csc",
    "coo",
    "matrix-market",
    "bfs",
    "sssp",
    "betweenness-centrality",
    "geolocation",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["graphessentials"]

[tool.pytest.ini_options]
addopts = "-ra"
