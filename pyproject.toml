[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cpkit"
version = "0.1.0"
description = "Algorithms and data structures for competitive programming"
requires-python = ">=3.10"
dependencies = [
    "sortedcontainers",
]
keywords = [
    "algorithms",
    "data-structures",
    "competitive-programming",
    "graphs",
    "strings",
    "number-theory",
    "geometry",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["cpkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
