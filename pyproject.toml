[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "schulte"
version = "0.1.0"
description = "A Schulte table attention-training puzzle with a timer"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["schulte", "puzzle", "game", "attention", "training", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
schulte = "schulte.game:main"

[tool.hatch.build.targets.wheel]
packages = ["schulte"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
