[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cyclebreak"
version = "0.1.0"
description = "Minimum-weight cycle breaking for weighted directed and undirected graphs"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "cycle", "feedback-edge-set", "kruskal", "union-find"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: POSIX",
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
cyclebreak = "cyclebreak.cli:main"
cyclebreak-generate = "cyclebreak.generator:main"

[tool.hatch.build.targets.wheel]
packages = ["cyclebreak"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
