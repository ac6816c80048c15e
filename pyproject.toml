[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zanpy"
version = "0.1.0"
description = "A small n-dimensional float array library with broadcasting arithmetic and basic linear algebra"
requires-python = ">=3.10"
dependencies = []
keywords = ["ndarray", "matrix", "broadcasting", "linear-algebra", "array"]
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
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["zanpy"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
