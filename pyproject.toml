[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lambquest"
version = "0.1.0"
description = "A frame-by-frame model of a small top-down arcade game: a lamb collects coins and fends off a bat and a cloak."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "arcade", "simulation", "top-down", "collision"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lambquest = "lambquest.game:main"

[tool.hatch.build.targets.wheel]
packages = ["lambquest"]

[tool.pytest.ini_options]
addopts = "-ra"
