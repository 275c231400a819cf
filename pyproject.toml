[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "citybuilder"
version = "0.1.0"
description = "Core model of a city building game: grid coordinates, terrain, roads and road graphs, camera and lighting maths, and a widget layout toolkit"
requires-python = ">=3.10"
keywords = ["game", "city", "simulation", "terrain", "roads", "grid", "gui-layout"]
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
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["citybuilder"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
