[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "keyquest"
version = "1.0.0"
description = "A small tile-based game: collect every key, then reach the door."
requires-python = ">=3.10"
keywords = ["game", "puzzle", "tile", "pygame", "maze"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: X11 Applications",
    "Environment :: MacOS X",
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
keyquest = "keyquest.cli:main"
keyquest-bonus = "keyquest.cli:main_bonus"

[tool.hatch.build.targets.wheel]
packages = ["keyquest"]

[tool.pytest.ini_options]
addopts = "-ra"
