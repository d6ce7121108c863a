"""Forward-difference error experiments on the sum-of-squares function."""

__version__ = "0.1.0"
