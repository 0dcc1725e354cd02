[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ores"
version = "0.1.0"
description = "A colour matching puzzle game on a grid of boxes, built on pygame"
requires-python = ">=3.10"
keywords = ["game", "puzzle", "pygame", "colour matching", "ores"]
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
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
ores = "ores.app:main"

[tool.hatch.build.targets.wheel]
packages = ["ores"]

[tool.pytest.ini_options]
addopts = "-ra"
