"""Shape primitives, random setup and mutation, transforms and search state for approximating images with shapes."""

__version__ = "0.1.0"