[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "treeworks"
version = "0.1.0"
description = "Small, readable data-structure examples: a cube, complete binary trees with traversals, and a self-checking AVL tree"
requires-python = ">=3.10"
dependencies = []
keywords = ["avl", "binary tree", "tree traversal", "data structures", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
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
test = ["pytest", "hypothesis"]

[project.scripts]
treeworks = "treeworks.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["treeworks"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
