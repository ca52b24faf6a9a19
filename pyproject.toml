[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sandbox-apps"
version = "0.1.0"
description = "Small console programs: a todo list, a fruit guessing game, a tic-tac-toe move prompt and a few collection helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["todo", "guessing-game", "tic-tac-toe", "console", "examples"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sandbox-basics = "sandbox_apps.basics:main"
sandbox-todo = "sandbox_apps.todo:main"
sandbox-guess = "sandbox_apps.guessing:main"
sandbox-tictactoe = "sandbox_apps.tictactoe:main"

[tool.hatch.build.targets.wheel]
packages = ["sandbox_apps"]

[tool.pytest.ini_options]
addopts = "-ra"
