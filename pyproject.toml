[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "goblin_castle"
version = "0.1.0.dev0"
description = "A small terminal roguelike: explore a randomly generated castle full of goblins."
requires-python = ">=3.10"
keywords = ["roguelike", "game", "terminal", "dungeon", "fov"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
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
    "Topic :: Games/Entertainment :: Role-Playing",
]
dependencies = [
    "blessed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
goblin-castle = "goblin_castle.app:main"

[tool.hatch.build.targets.wheel]
packages = ["goblin_castle"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
