[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sc2kit"
version = "0.1.0"
description = "Map analysis and game-runner helpers for StarCraft II bots: resource clustering, base locations, terrain grids and launch settings."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "starcraft",
    "sc2",
    "bot",
    "real-time strategy",
    "map analysis",
    "clustering",
    "dbscan",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Real Time Strategy",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sc2kit"]

[tool.hatch.build.targets.sdist]
include = ["sc2kit", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
