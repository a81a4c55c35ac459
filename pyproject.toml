[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "particlesim"
version = "0.1.0"
description = "Terminal particle-life simulation with interaction presets, random events and run statistics"
requires-python = ">=3.10"
dependencies = []
keywords = ["particles", "simulation", "particle-life", "terminal", "ansi"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
particlesim = "particlesim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["particlesim"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
