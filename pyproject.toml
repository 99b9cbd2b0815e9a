[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "labstructs"
version = "0.1.0"
description = "Classic data structures with interactive demos: queue simulation, stacks, expression trees, AVL trees, hash sets and graph cuts"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "queue",
    "simulation",
    "stack",
    "avl",
    "hash table",
    "binary search tree",
    "linked list",
    "graph",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
labstructs-queues = "labstructs.queue_cli:main"
labstructs-search = "labstructs.search_cli:main"
labstructs-graph = "labstructs.graph_cli:main"

[tool.hatch.build.targets.wheel]
packages = ["labstructs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
