"""
Core graph data structures and facades.

This module contains the graph store and the public graph classes built on
top of it.
"""

__all__ = []
