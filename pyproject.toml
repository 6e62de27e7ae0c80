[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cycutil"
version = "0.1.0"
description = "Small utilities: a growable ring queue, time-windowed statistics, size formatting and a command-line option parser"
requires-python = ">=3.10"
dependencies = []
keywords = ["ring buffer", "queue", "statistics", "command line", "options"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cycutil"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
