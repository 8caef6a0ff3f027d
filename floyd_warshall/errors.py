class MalformedInputError(ValueError):
    """Edge list could not be parsed into (vertex, vertex, weight) triples."""


class UnknownVertexError(KeyError):
    pass


class PathCycleError(RuntimeError):
    """Next-hop chain between two vertices revisits a vertex."""

    def __init__(self, source, destination, path=()):
        self.source = source
        self.destination = destination
        self.path = list(path)
        super().__init__(f"cycle while walking {source} -> {destination}, got {self.path}")
