"""2D, 3D and 4D vectors and 3x3 and 4x4 matrices for row-vector graphics transforms."""

__version__ = "0.1.0"