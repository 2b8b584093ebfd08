"""Shortest solutions to the two-jug water puzzle by breadth-first search."""

__version__ = "0.1.0"
__all__ = ["cli", "full_graph", "graph", "on_the_fly"]