[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "debugwarmups"
version = "0.1.0"
description = "Debugger warm-up exercises, a fire simulation and small console utilities"
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = ["debugger", "education", "simulation", "fire", "exercises", "xorshift"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
debugwarmups = "debugwarmups.app:main"

[tool.hatch.build.targets.wheel]
packages = ["debugwarmups"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
