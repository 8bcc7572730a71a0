[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "funkit"
version = "0.1.0"
description = "Functional helpers for Python collections: filtering, searching, transforming, reducing and path lookup."
requires-python = ">=3.10"
dependencies = []
keywords = ["functional", "collections", "utilities", "filter", "map", "reduce"]
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
packages = ["funkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
