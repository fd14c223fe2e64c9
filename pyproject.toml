[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "protolife"
version = "0.1.0"
description = "Particle-life simulation: coloured particles attract and repel each other on a toroidal world"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "particle life",
    "artificial life",
    "simulation",
    "emergence",
    "spatial hash",
    "toroidal",
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
    "Topic :: Scientific/Engineering :: Artificial Life",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
protolife = "protolife.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["protolife"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
