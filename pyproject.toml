[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rpsgame"
version = "1.0.0"
description = "A terminal game of Rock, Paper, Scissors played against the computer."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "rock-paper-scissors", "terminal", "cli"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
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
rpsgame = "rpsgame.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rpsgame"]

[tool.pytest.ini_options]
addopts = "-ra"
