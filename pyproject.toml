[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "formlayout"
version = "1.0.0"
description = "Geometry primitives and a small component tree for laying out immediate-mode user interfaces"
requires-python = ">=3.10"
dependencies = []
keywords = ["layout", "geometry", "rectangle", "gui", "components", "immediate-mode"]
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
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["formlayout"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
