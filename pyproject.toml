[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "geometrize"
version = "0.1.0"
description = "Geometric primitives, random shape setup and mutation, transforms and search state for approximating images with simple shapes"
requires-python = ">=3.10"
dependencies = []
keywords = ["geometry", "shapes", "primitives", "mutation", "hill-climbing", "generative-art"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Artistic Software",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["geometrize"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
