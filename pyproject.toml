[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "scrabble"
version = "0.1.0"
description = "A two-player Scrabble board game with a pygame interface"
requires-python = ">=3.10"
keywords = ["scrabble", "word game", "board game", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
scrabble = "scrabble.app:main"

[tool.hatch.build.targets.wheel]
packages = ["scrabble"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
