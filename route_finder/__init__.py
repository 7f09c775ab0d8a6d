"""Top-level package for the route finder.

Computes the shortest driving route between cities of a small, fixed
Washington State road network and describes it turn by turn.
"""
