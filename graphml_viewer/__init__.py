"""Load simple GraphML graphs, lay them out with forces and view them in a window."""

__version__ = "0.2.0"