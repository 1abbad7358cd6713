"""
Core data classes for graph representation.

This module contains the node, edge and orientation types used throughout
the weightgraph library.
"""

from .node import pynode
from .edge import pyedge, pydirectededge
from .orientation import Orientation

__all__ = [
    'pynode',
    'pyedge',
    'pydirectededge',
    'Orientation',
]
