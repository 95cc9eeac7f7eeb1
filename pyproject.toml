[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hackslash"
version = "0.1.0"
description = "Engine-independent game logic for a top-down hack-and-slash RPG: stats, resources, attributes, grid inventories, abilities, characters and interface state"
requires-python = ">=3.10"
dependencies = []
keywords = ["rpg", "game", "inventory", "stats", "hack-and-slash"]
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
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hackslash"]

[tool.pytest.ini_options]
addopts = "-ra"
