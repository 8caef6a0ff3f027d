from .errors import MalformedInputError, PathCycleError, UnknownVertexError
from .graph import INF, Graph
from .engine import PathResult, PathStatus, ShortestPaths, floyd_warshall

__all__ = [
    "INF",
    "Graph",
    "ShortestPaths",
    "PathResult",
    "PathStatus",
    "floyd_warshall",
    "MalformedInputError",
    "PathCycleError",
    "UnknownVertexError",
]
