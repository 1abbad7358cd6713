"""
Graph analysis modules for cycle detection and shortest paths.

This module contains classes that read a graph store without modifying it.
"""

__all__ = []
