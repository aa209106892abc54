"""Small containers, a complex number type, a segment tree and puzzle solutions."""

__version__ = "0.1.0"