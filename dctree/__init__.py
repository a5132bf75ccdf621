"""Divide-and-conquer row partitioning trees for sparse graphs."""

__version__ = "0.1.0"
__all__ = ["partitioning", "permutation", "tree"]