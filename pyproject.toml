[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "graphserve"
version = "0.1.0"
description = "Random undirected graphs, Eulerian circuits and classic graph algorithms, served over TCP"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graph",
    "euler",
    "eulerian circuit",
    "hamiltonian cycle",
    "minimum spanning tree",
    "strongly connected components",
    "maximum clique",
    "tcp server",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
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

[project.scripts]
graphserve-euler = "graphserve.euler_cli:main"
graphserve-euler-server = "graphserve.euler_server:main"
graphserve-algorithm-server = "graphserve.algorithm_server:main"

[tool.hatch.build.targets.wheel]
packages = ["graphserve"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
