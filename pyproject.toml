[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "algokit"
version = "0.1.0"
description = "Classic algorithm and data-structure routines: LRU cache, stacks, linked lists, trees, strings, arrays, grids and more."
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "data structures", "lru cache", "linked list", "binary tree", "sudoku"]
classifiers = [
    "Development Status :: 4 - Beta",
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["algokit*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
