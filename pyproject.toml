[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "agptools"
version = "0.1.0"
description = "2D geometry, math, string, timing, scheduling and view-mapping utilities for small game engines"
requires-python = ">=3.10"
dependencies = []
keywords = ["geometry", "game", "vector", "rectangle", "scheduler", "viewport", "utilities"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["agptools"]

[tool.pytest.ini_options]
addopts = "-ra"
