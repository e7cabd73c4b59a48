[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "osm2lanes"
version = "0.1.0"
description = "Typed OpenStreetMap tag schemes, a lane-by-lane road model and Overpass lookups"
requires-python = ">=3.10"
keywords = ["openstreetmap", "osm", "lanes", "road", "tags", "overpass"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: GIS",
]
dependencies = [
    "requests",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[tool.hatch.build.targets.wheel]
packages = ["osm2lanes"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
