[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "babel2048"
version = "0.1.0"
description = "A Library of Babel for 2048: browse every 4x4 board by global and local ID and play moves on it"
requires-python = ">=3.10"
dependencies = []
keywords = ["2048", "puzzle", "library-of-babel", "game", "tkinter"]
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
test = ["pytest"]

[project.scripts]
babel2048 = "babel2048.gui:main"

[tool.hatch.build.targets.wheel]
packages = ["babel2048"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
