[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "consolebounce"
version = "0.1.0"
description = "Bouncing balls and circles rendered as ASCII art in the terminal"
requires-python = ">=3.10"
dependencies = []
keywords = ["ascii", "terminal", "simulation", "physics", "collision", "animation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
consolebounce = "consolebounce.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["consolebounce"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
