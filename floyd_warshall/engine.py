import enum
import logging

from .errors import PathCycleError
from .graph import INF, Graph

logger = logging.getLogger(__name__)


class PathStatus(enum.Enum):
    REACHED = "reached"
    NO_PATH = "no_path"
    CYCLE_DETECTED = "cycle_detected"


class PathResult:
    """Outcome of walking the next-hop table from `source` to `destination`."""

    def __init__(self, status, source, destination, path=None):
        self.status = status
        self.source = source
        self.destination = destination
        self.path = path

    def __repr__(self):
        return f"PathResult({self.status.name}, {self.source!r} -> {self.destination!r}, path={self.path!r})"

    def __bool__(self):
        return self.status is PathStatus.REACHED

    @property
    def reached(self):
        return self.status is PathStatus.REACHED

    def unwrap(self):
        """Return the path, None when there is no path, raise PathCycleError on a cycle."""
        if self.status is PathStatus.CYCLE_DETECTED:
            raise PathCycleError(self.source, self.destination, self.path or ())
        if self.status is PathStatus.NO_PATH:
            return None
        return self.path


class ShortestPaths:
    """
    Floyd-Warshall over a `Graph`, relaxing its matrices in place.

    Negative cycles are not rejected. After `relax_all` every vertex with a
    negative diagonal entry sits on one, and any pair whose shortest path
    can pass through such a vertex reconstructs to CYCLE_DETECTED.
    """

    def __init__(self, graph):
        self.graph = graph

    def relax_all(self):
        dist, nxt = self.graph.dist, self.graph.next
        n = len(self.graph)
        updates = 0
        for k in range(n):
            row_k = dist[k]
            for i in range(n):
                row_i = dist[i]
                if row_i[k] == INF:
                    continue
                next_i = nxt[i]
                for j in range(n):
                    dkj = row_k[j]
                    if dkj == INF:
                        continue
                    alt = row_i[k] + dkj
                    if alt < row_i[j]:
                        row_i[j] = alt
                        # first hop from i, not the midpoint
                        next_i[j] = next_i[k]
                        updates += 1
        logger.debug("relaxed %d vertices, %d updates", n, updates)

        negative = self.negative_cycle_vertices()
        if negative:
            logger.warning("negative cycle through %d vertices: %r", len(negative), negative)
        return updates

    def _negative_indices(self):
        dist = self.graph.dist
        return [i for i in range(len(self.graph)) if dist[i][i] < 0]

    def negative_cycle_vertices(self):
        return [self.graph.vertices[i] for i in self._negative_indices()]

    def has_negative_cycle(self):
        return bool(self._negative_indices())

    def distance(self, u, v):
        return self.graph.distance(u, v)

    def _cycle_affected(self, i, j, negative):
        dist = self.graph.dist
        return any(dist[i][w] != INF and dist[w][j] != INF for w in negative)

    def reconstruct_path(self, source, destination, negative=None):
        graph = self.graph
        i, j = graph.index_of(source), graph.index_of(destination)
        if graph.dist[i][j] == INF:
            return PathResult(PathStatus.NO_PATH, source, destination)
        if negative is None:
            negative = self._negative_indices()
        if self._cycle_affected(i, j, negative):
            return PathResult(PathStatus.CYCLE_DETECTED, source, destination, [source])

        path = [source]
        if source == destination:
            return PathResult(PathStatus.REACHED, source, destination, path)

        seen = {source}
        current = source
        # every step adds an unseen vertex, so at most len(graph) steps
        while True:
            candidate = graph.next[graph.index[current]][j]
            if candidate is None or candidate in seen:
                logger.debug("broken next-hop chain %r -> %r after %r", source, destination, path)
                return PathResult(PathStatus.CYCLE_DETECTED, source, destination, path)
            path.append(candidate)
            seen.add(candidate)
            if candidate == destination:
                return PathResult(PathStatus.REACHED, source, destination, path)
            current = candidate

    def path_weight(self, path):
        """Sum of direct edge weights along `path`."""
        return sum(self.graph.edge_weight(u, v) for u, v in zip(path, path[1:]))

    def all_pairs(self, with_paths=True):
        """Yield (u, v, distance, PathResult or None) for every ordered pair u != v."""
        graph = self.graph
        negative = self._negative_indices()
        for i, u in enumerate(graph.vertices):
            for j, v in enumerate(graph.vertices):
                if i == j:
                    continue
                result = self.reconstruct_path(u, v, negative) if with_paths else None
                yield u, v, graph.dist[i][j], result


def floyd_warshall(edges):
    engine = ShortestPaths(Graph.from_edges(edges))
    engine.relax_all()
    return engine
