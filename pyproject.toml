[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "transit-catalogue"
version = "0.1.0"
description = "Transport catalogue: bus route statistics, stop lookups and fastest-route queries over a JSON request document"
requires-python = ">=3.10"
dependencies = []
keywords = ["transport", "bus", "routing", "json", "catalogue", "shortest-path"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: GIS",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
transit-catalogue = "transit_catalogue.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["transit_catalogue"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
