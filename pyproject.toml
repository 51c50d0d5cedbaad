[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "infitictac"
version = "0.1.0"
description = "Tic-tac-toe on 3x3 and 4x4 boards, for two humans, a human against the computer, or two humans and the computer"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["tic-tac-toe", "game", "board game", "pygame", "ai"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: X11 Applications",
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

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
infitictac = "infitictac.app:main"
infitictac-console = "infitictac.console:main"

[tool.hatch.build.targets.wheel]
packages = ["infitictac"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
