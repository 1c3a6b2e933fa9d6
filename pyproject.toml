[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hllbench"
version = "0.1.0"
description = "HyperLogLog cardinality estimation experiments on reproducible random string streams"
requires-python = ">=3.10"
dependencies = []
keywords = ["hyperloglog", "cardinality", "sketch", "streaming", "benchmark"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Information Analysis",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hllbench = "hllbench.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["hllbench"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
