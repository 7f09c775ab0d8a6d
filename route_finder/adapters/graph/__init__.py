"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- DijkstraRouteSolver: Finds shortest routes over the weight matrix
"""

from .dijkstra_solver import DijkstraRouteSolver

__all__ = ["DijkstraRouteSolver"]
