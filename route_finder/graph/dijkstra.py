"""Shortest-path computation over the weight matrix.

Two strategies share the same contract::

    find_path(graph, start, end) -> (distance, path)

``dijkstra`` is the classic min-heap algorithm. ``fifo_relaxation`` is
the label-correcting variant driven by a plain FIFO queue; it is kept
for compatibility with routes computed by earlier releases.
"""

import heapq
from collections import deque
from typing import Callable, Deque, Dict, List, Optional, Tuple

from ..domain.models import INFINITY, Distance
from .store import GraphStore

PathFinder = Callable[[GraphStore, int, int], Tuple[Distance, List[int]]]


def dijkstra(graph: GraphStore, start: int, end: int) -> Tuple[Distance, List[int]]:
    """Compute the shortest path between two nodes using Dijkstra.

    Parameters
    ----------
    graph:
        Road network store.
    start:
        Id of the departure node.
    end:
        Id of the arrival node.

    Returns
    -------
    number, list[int]
        The total distance and the node ids from ``start`` to ``end``
        (inclusive). If ``end`` is unreachable, returns
        ``(INFINITY, [end])``.
    """
    distances: List[Distance] = [INFINITY] * graph.size
    previous: List[Optional[int]] = [None] * graph.size
    distances[start] = 0

    heap: List[Tuple[Distance, int]] = [(0, start)]

    while heap:
        current_distance, u = heapq.heappop(heap)

        # skip outdated entries
        if current_distance > distances[u]:
            continue

        for v, weight in graph.neighbors(u):
            new_distance = current_distance + weight
            if new_distance < distances[v]:
                distances[v] = new_distance
                previous[v] = u
                heapq.heappush(heap, (new_distance, v))

    return distances[end], _reconstruct(previous, end)


def fifo_relaxation(
    graph: GraphStore, start: int, end: int
) -> Tuple[Distance, List[int]]:
    """Compute a path with FIFO-ordered relaxation.

    A node is marked visited when it leaves the queue and is never
    relaxed again afterwards, so on graphs with uneven weights it can be
    settled before its distance is final. Nodes may be queued several
    times as their distance improves.

    Returns the same shape as :func:`dijkstra`.
    """
    size = graph.size
    visited = [False] * size
    distances: List[Distance] = [INFINITY] * size
    previous: List[Optional[int]] = [None] * size
    distances[start] = 0

    queue: Deque[int] = deque([start])

    while queue:
        current = queue.popleft()
        visited[current] = True

        for i, weight in graph.neighbors(current):
            if visited[i]:
                continue
            new_distance = distances[current] + weight
            if new_distance < distances[i]:
                distances[i] = new_distance
                previous[i] = current
                queue.append(i)

    return distances[end], _reconstruct(previous, end)


def _reconstruct(previous: List[Optional[int]], end: int) -> List[int]:
    """Walk the back-pointers from ``end`` and reverse.

    An unreachable ``end`` has no predecessor, which yields ``[end]``.
    """
    path: List[int] = []
    node: Optional[int] = end
    while node is not None:
        path.append(node)
        node = previous[node]
    path.reverse()
    return path


PATH_FINDER_STRATEGIES: Dict[str, PathFinder] = {
    "dijkstra": dijkstra,
    "fifo": fifo_relaxation,
}
