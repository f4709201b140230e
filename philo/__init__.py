"""Dining philosophers simulation: argument parsing, the threaded table and its command."""

__version__ = "0.1.0"
__all__ = ["__version__"]