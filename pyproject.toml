[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mws"
version = "0.1.0"
description = "Command-line tool for managing configuration profiles stored as YAML files"
requires-python = ">=3.10"
keywords = ["cli", "profiles", "configuration", "yaml"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]
dependencies = [
    "click>=8.0",
    "pyyaml>=6.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[project.scripts]
mws = "mws.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mws"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
