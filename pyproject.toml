[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dungeon-arcade"
version = "0.1.0"
description = "A terminal dungeon walk with a shop, a boss fight and a collection of mini-games"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "game",
    "terminal",
    "dungeon",
    "blackjack",
    "memory",
    "maze",
    "platformer",
    "arcade",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Korean",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dungeon-arcade = "dungeon_arcade.dungeon:main"

[tool.hatch.build.targets.wheel]
packages = ["dungeon_arcade"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
