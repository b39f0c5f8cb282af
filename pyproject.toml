[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tilespace"
version = "0.1.0"
description = "Fixed-size index vectors, index ranges and tiled index iteration for data-parallel work decomposition"
requires-python = ">=3.10"
dependencies = []
keywords = ["index", "vector", "tiling", "parallel", "linearize", "pitch"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tilespace"]

[tool.pytest.ini_options]
addopts = "-ra"
