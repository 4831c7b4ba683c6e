[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gamedevquiz"
version = "1.0.0"
description = "A 'Who Wants to Be a Game Developer?' quiz game with a fifteen-step prize ladder and lifelines"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["quiz", "game", "trivia", "pygame", "prize ladder"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
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

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
gamedevquiz = "gamedevquiz.app:main"

[tool.hatch.build.targets.wheel]
packages = ["gamedevquiz"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
