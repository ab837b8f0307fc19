[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "corext"
version = "1.5.4"
description = "Extension helpers for fixed-width integers, iterators, constants, default values and cloning of nested collections."
requires-python = ">=3.10"
dependencies = []
keywords = ["extensions", "iterators", "integers", "defaults", "constants", "cloning"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
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

[tool.hatch.build.targets.wheel]
packages = ["corext"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
