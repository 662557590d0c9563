[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rpgcompanion"
version = "0.1.0"
description = "A companion for tabletop role-playing sessions: dice roller, investigator sheets and a random name generator."
requires-python = ">=3.10"
dependencies = []
keywords = ["rpg", "tabletop", "dice", "character sheet", "name generator"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
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

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rpgcompanion = "rpgcompanion.app:main"

[tool.hatch.build.targets.wheel]
packages = ["rpgcompanion"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
