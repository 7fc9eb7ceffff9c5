[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oyfight"
version = "0.1.0"
description = "A turn-based terminal fighting game: pick three fighters each and battle a friend or a bot, with optional sprite animations for attacks."
requires-python = ">=3.10"
keywords = ["game", "terminal", "turn-based", "fighting", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: French",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Turn Based Strategy",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
oyfight = "oyfight.cli:main"
oyfight-anim = "oyfight.viewer:main"

[tool.hatch.build.targets.wheel]
packages = ["oyfight"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
