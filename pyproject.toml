[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "familygraph"
version = "0.1.0"
description = "Interactive family tree editor with kinship distances, inheritance splits and Graphviz export"
requires-python = ">=3.10"
dependencies = []
keywords = ["family tree", "genealogy", "graph", "kinship", "graphviz"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Sociology :: Genealogy",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
familygraph = "familygraph.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["familygraph"]

[tool.pytest.ini_options]
addopts = "-ra"
