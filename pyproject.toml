[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "edaversi"
version = "0.1.0"
description = "Reversi (Othello) against a minimax AI with alpha-beta pruning, in a pygame window"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["reversi", "othello", "board game", "minimax", "alpha-beta", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
edaversi = "edaversi.main:main"

[tool.hatch.build.targets.wheel]
packages = ["edaversi"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
