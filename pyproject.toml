[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "todocli"
version = "0.1.0"
description = "A terminal todo manager with a Tokyo Night colour theme"
requires-python = ">=3.10"
keywords = ["todo", "terminal", "tui", "curses", "tasks"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Operating System :: MacOS",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
    "Topic :: Utilities",
]
dependencies = [
    "platformdirs",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
todocli = "todocli.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["todocli"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
