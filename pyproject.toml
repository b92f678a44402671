[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fizzgrid"
version = "0.1.0"
description = "A FizzBuzz-driven tile grid animation with square-wave sound effects"
requires-python = ">=3.10"
keywords = ["fizzbuzz", "grid", "pygame", "animation", "game"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
fizzgrid = "fizzgrid.app:main"

[tool.hatch.build.targets.wheel]
packages = ["fizzgrid"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
