[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chomper"
version = "0.1.0"
description = "A small maze-chasing arcade game built on pygame"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "arcade", "maze", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
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
test = [
    "pytest",
]

[project.scripts]
chomper = "chomper.app:main"

[tool.hatch.build.targets.wheel]
packages = ["chomper"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
