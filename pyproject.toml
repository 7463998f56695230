[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsworks"
version = "0.1.0"
description = "Classic data structures (stacks, heaps, search trees) with command-driven front ends and timing benchmarks"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data-structures",
    "stack",
    "heap",
    "min-max-heap",
    "avl",
    "splay-tree",
    "treap",
    "binary-search-tree",
    "quicksort",
    "benchmark",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dsworks-stack = "dsworks.stack_commands:main"
dsworks-sort = "dsworks.quicksort:main"
dsworks-gen-array = "dsworks.array_gen:main"
dsworks-minmax-heap = "dsworks.minmax_heap:main"
dsworks-indexed-heap = "dsworks.indexed_heap:main"
dsworks-avl = "dsworks.avl:main"
dsworks-splay-map = "dsworks.splay_map:main"
dsworks-treap = "dsworks.treap:main"
dsworks-bench = "dsworks.benchmarks:main"

[tool.hatch.build.targets.wheel]
packages = ["dsworks"]

[tool.hatch.build.targets.sdist]
include = ["dsworks", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
