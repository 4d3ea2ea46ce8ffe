[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rasterlab"
version = "0.1.0"
description = "Classic raster graphics algorithms: line and circle rasterisation, line clipping, 2D transforms and a text canvas"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graphics",
    "raster",
    "bresenham",
    "dda",
    "midpoint-circle",
    "cohen-sutherland",
    "liang-barsky",
    "clipping",
    "transformations",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rasterlab = "rasterlab.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rasterlab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
