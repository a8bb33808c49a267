[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "glyphevolve"
version = "0.1.0"
description = "Evolve a set of anti-aliased line segments that approximates a font glyph with a genetic algorithm."
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = [
    "genetic-algorithm",
    "evolutionary-computation",
    "font",
    "glyph",
    "rasterization",
    "line-drawing",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
glyphevolve = "glyphevolve.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["glyphevolve"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
