"""
Graph operation modules for matrices, closure, reduction and ordering.

This module contains functions that derive matrices from a graph store and
the acyclic-only operations, one of which rewrites the store in place.
"""

__all__ = []
