[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "timber"
version = "0.1.0"
description = "A lumberjack arcade game: chop the tree, dodge the branches, beat the clock."
requires-python = ">=3.10"
keywords = ["game", "arcade", "pygame", "timber", "lumberjack"]
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
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
timber = "timber.app:main"

[tool.hatch.build.targets.wheel]
packages = ["timber"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
