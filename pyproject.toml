[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "collectionboot"
version = "0.1.0"
description = "Small collection helpers: background tasks with results, a hash set, and chainable queries over sequences."
requires-python = ">=3.10"
dependencies = []
keywords = ["collections", "set", "query", "linq", "tasks", "concurrency", "threads"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["collectionboot"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
