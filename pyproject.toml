[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nothingame"
version = "0.1.0"
description = "Core logic of a minimalist 2D puzzle platformer: geometry, rigid bodies, rasterisation, text widgets and level discovery"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "platformer", "puzzle", "geometry", "physics", "2d", "rasterisation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["nothingame"]

[tool.pytest.ini_options]
addopts = "-ra"
