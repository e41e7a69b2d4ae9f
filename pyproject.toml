[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "derptower"
version = "0.1.0"
description = "A small tower defence game: build towers, stop the chickens, collect their gold."
requires-python = ">=3.10"
keywords = ["game", "tower defence", "pygame", "strategy"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Real Time Strategy",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
derptower = "derptower.game:main"

[tool.hatch.build.targets.wheel]
packages = ["derptower"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
