[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "replline"
version = "0.1.0"
description = "A single-line terminal editor for interactive interpreters, with syntax colouring, history and completion"
requires-python = ">=3.10"
dependencies = [
    "blessed",
]
keywords = ["repl", "readline", "line-editor", "terminal", "completion", "history"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Terminals",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["replline"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
