[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dcspec"
version = "0.1.0"
description = "Typed display variables, XML display-spec helpers and primitive geometry for data-driven cockpit displays"
requires-python = ">=3.10"
dependencies = []
keywords = ["display", "xml", "variables", "hmi", "cockpit", "map projection"]
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
    "Topic :: Scientific/Engineering :: Human Machine Interfaces",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dcspec"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
