[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dslab"
version = "0.1.0"
description = "Classic data structures and graph algorithms with small interactive command-line programs"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "algorithms",
    "graphs",
    "bfs",
    "dfs",
    "minimum spanning tree",
    "kruskal",
    "prim",
    "disjoint set",
    "binary search tree",
    "linked list",
    "queue",
    "stack",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
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
dslab-bfs = "dslab.graphs:bfs_main"
dslab-dfs = "dslab.graphs:dfs_main"
dslab-kruskal = "dslab.graphs:kruskal_main"
dslab-prim = "dslab.graphs:prim_main"
dslab-disjoint-set = "dslab.disjoint_set:main"
dslab-bitset = "dslab.bitset:main"
dslab-bst = "dslab.bst:main"
dslab-binary-tree = "dslab.binary_tree:main"
dslab-circular-queue = "dslab.circular_queue:main"
dslab-doubly-linked-list = "dslab.doubly_linked_list:main"
dslab-linked-list = "dslab.linked_list:main"
dslab-stack = "dslab.stack:main"

[tool.hatch.build.targets.wheel]
packages = ["dslab"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
