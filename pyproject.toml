[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zubswat"
version = "0.1.0"
description = "A small arcade game: swat the creature that flees from your cursor before the ambulance takes it away"
requires-python = ">=3.10"
keywords = ["game", "arcade", "pygame", "physics"]
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
zubswat = "zubswat.app:main"

[tool.hatch.build.targets.wheel]
packages = ["zubswat"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
