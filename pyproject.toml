[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rosedb"
version = "0.1.0"
description = "Building blocks of an embedded key-value store: append-only data files, an expiry table, a byte-keyed skip list and in-memory list, hash, set and sorted-set structures."
requires-python = ">=3.10"
dependencies = []
keywords = ["key-value", "database", "storage", "skiplist", "sorted-set", "embedded"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Database Engines/Servers",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rosedb"]

[tool.pytest.ini_options]
addopts = "-ra"
