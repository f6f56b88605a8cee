"""Algorithm drills: disjoint sets, grid path problems, queue merging and a command-line runner."""

__version__ = "0.1.0"

__all__ = ["__version__"]