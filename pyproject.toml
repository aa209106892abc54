[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "misislab"
version = "0.1.0"
description = "Small containers, a complex number type, a segment tree and solutions to classic programming puzzles"
requires-python = ">=3.10"
dependencies = []
keywords = ["complex", "array", "stack", "queue", "segment-tree", "algorithms", "competitive-programming"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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
packages = ["misislab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
