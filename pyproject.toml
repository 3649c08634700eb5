[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fantasia"
version = "0.1.0"
description = "A fantasy clicker role-playing game: click enemies, collect coins, level up and defeat stage bosses."
requires-python = ">=3.10"
keywords = ["game", "clicker", "idle", "rpg", "pygame"]
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
    "Topic :: Games/Entertainment :: Role-Playing",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
fantasia = "fantasia.game:main"

[tool.hatch.build.targets.wheel]
packages = ["fantasia"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
