"""Graph-related utilities for representing the road network.

This subpackage holds the immutable graph store, the built-in network
and the path-finding algorithms that run on top of it.
"""

from .dijkstra import PATH_FINDER_STRATEGIES, dijkstra, fifo_relaxation
from .network import build_default_store
from .store import NO_EDGE, GraphStore

__all__ = [
    "GraphStore",
    "NO_EDGE",
    "build_default_store",
    "dijkstra",
    "fifo_relaxation",
    "PATH_FINDER_STRATEGIES",
]
