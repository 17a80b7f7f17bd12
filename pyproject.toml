[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fsmreduce"
version = "0.1.0"
description = "Remove unreachable states from Mealy and Moore automata and minimize them"
requires-python = ">=3.10"
dependencies = []
keywords = ["automaton", "finite-state machine", "mealy", "moore", "minimization"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fsmreduce = "fsmreduce.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["fsmreduce"]

[tool.pytest.ini_options]
addopts = "-ra"
