[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lsopts"
version = "0.1.0"
description = "Command-line argument parsing and option deduction for a file-listing tool"
requires-python = ">=3.10"
dependencies = []
keywords = ["cli", "options", "argument-parsing", "ls", "file-listing"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lsopts"]

[tool.pytest.ini_options]
addopts = "-ra"
