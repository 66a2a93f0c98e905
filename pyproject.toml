[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bgcsim"
version = "0.1.0"
description = "Daily carbon, nitrogen and water process routines and input readers for a point ecosystem biogeochemistry model"
requires-python = ">=3.10"
dependencies = []
keywords = ["ecology", "biogeochemistry", "carbon cycle", "nitrogen cycle", "ecosystem model"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bgcsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
