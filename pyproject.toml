[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "porsmo"
version = "0.1.0"
description = "A pomodoro, timer and stopwatch, all in one terminal app"
requires-python = ">=3.10"
keywords = ["cli", "pomodoro", "timer", "countdown", "stopwatch", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
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
    "blessed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
porsmox = "porsmo.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["porsmo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
