"""Leaf Identifier: upload a leaf photo, get an educational description."""

__version__ = "0.1.0"
