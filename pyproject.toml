[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "warfield"
version = "0.1.0"
description = "Armies of infantry and vehicle units, their scoring and fighting, on a grid battlefield of terrain"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "army", "battlefield", "terrain", "strategy"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["warfield"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
