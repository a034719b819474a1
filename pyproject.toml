[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "setkit"
version = "0.1.0"
description = "Binary tree node primitives with AVL rotations, tree printers, a chained hash set, a stopwatch and walk-through demos"
requires-python = ">=3.10"
dependencies = []
keywords = ["set", "binary search tree", "avl", "rotation", "hash set", "data structures"]
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
    "Topic :: Software Development :: Libraries",
    "Topic :: Education",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
setkit-traversal-demo = "setkit.traversal_demo:main"
setkit-rebalance-demo = "setkit.rebalance_demo:main"
setkit-hashset-demo = "setkit.hashset_demo:main"

[tool.hatch.build.targets.wheel]
packages = ["setkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
