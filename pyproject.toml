[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "griddbscan"
version = "0.1.0"
description = "Exact grid-based DBSCAN clustering for points of 2 to 20 dimensions"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "dbscan",
    "clustering",
    "density-based clustering",
    "kd-tree",
    "grid",
    "union-find",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
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
test = [
    "pytest",
]

[project.scripts]
griddbscan = "griddbscan.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["griddbscan"]

[tool.hatch.build.targets.sdist]
include = [
    "griddbscan",
    "tests",
    "pyproject.toml",
]

[tool.pytest.ini_options]
addopts = "-ra"
