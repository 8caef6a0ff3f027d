import logging

from .errors import UnknownVertexError

logger = logging.getLogger(__name__)

INF = float("inf")


class Graph:
    """
    Vertex set plus dense distance and next-hop matrices.

    Vertices get a dense index the first time they show up as an edge
    endpoint (the index arena); both matrices are indexed through it.
    Absent entries are INF in `dist` and None in `next`.
    """

    def __init__(self):
        self.vertices = []
        self.index = {}  # label -> row/column in the matrices
        self.dist = []
        self.next = []
        self.negative_self_loops = []
        self._edges = {}

    @classmethod
    def from_edges(cls, edges):
        graph = cls()
        for u, v, w in edges:
            graph.add_edge(u, v, w)
        graph.initialize_diagonal()
        return graph

    def __len__(self):
        return len(self.vertices)

    def __contains__(self, vertex):
        return vertex in self.index

    def _add_vertex(self, vertex):
        if vertex in self.index:
            return self.index[vertex]
        self.index[vertex] = len(self.vertices)
        self.vertices.append(vertex)
        for row in self.dist:
            row.append(INF)
        for row in self.next:
            row.append(None)
        n = len(self.vertices)
        self.dist.append([INF] * n)
        self.next.append([None] * n)
        return n - 1

    def index_of(self, vertex):
        try:
            return self.index[vertex]
        except KeyError:
            raise UnknownVertexError(vertex) from None

    def add_edge(self, source, destination, weight):
        i = self._add_vertex(source)
        j = self._add_vertex(destination)
        # duplicates overwrite, no multi-edge aggregation
        self.dist[i][j] = weight
        self.next[i][j] = destination
        self._edges[(source, destination)] = weight

    def initialize_diagonal(self):
        """
        Set distance(v, v) = 0 for every vertex.

        Has to run after all edges are in. Self-loops with weight >= 0 are
        overridden by the zero diagonal; a negative self-loop is kept as is
        and reported in `negative_self_loops`.
        """
        self.negative_self_loops = []
        for v, i in self.index.items():
            w = self._edges.get((v, v))
            if w is not None and w < 0:
                self.dist[i][i] = w
                self.next[i][i] = v
                self.negative_self_loops.append(v)
                logger.warning("negative self-loop on %r (weight %s) kept on the diagonal", v, w)
                continue
            self.dist[i][i] = 0
            self.next[i][i] = None

    def distance(self, u, v):
        return self.dist[self.index_of(u)][self.index_of(v)]

    def next_hop(self, u, v):
        return self.next[self.index_of(u)][self.index_of(v)]

    def set_distance(self, u, v, value):
        self.dist[self.index_of(u)][self.index_of(v)] = value

    def set_next_hop(self, u, v, vertex):
        if vertex is not None:
            self.index_of(vertex)
        self.next[self.index_of(u)][self.index_of(v)] = vertex

    def edges(self):
        """Direct edges as loaded, (u, v, w) with duplicates already resolved."""
        return [(u, v, w) for (u, v), w in self._edges.items()]

    def edge_weight(self, u, v):
        return self._edges.get((u, v), INF)
