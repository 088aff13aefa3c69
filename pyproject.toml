[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "plotframe"
version = "0.1.0"
description = "Chart frame layout helpers: tick locators, tick formatting, style configuration, bounds, axes and polar axes"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["plotting", "charts", "ticks", "axis", "visualization"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["plotframe"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
