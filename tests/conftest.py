import pytest

from floyd_warshall import INF


def _brute_force_distance(edges, source, destination):
    """Minimum weight over all simple paths; only valid without negative cycles."""
    if source == destination:
        return 0
    adj = {}
    for u, v, w in edges:
        adj.setdefault(u, {})[v] = w  # last write wins
    best = INF
    stack = [(source, 0, {source})]
    while stack:
        node, total, seen = stack.pop()
        for nxt, w in adj.get(node, {}).items():
            if nxt == destination:
                best = min(best, total + w)
            elif nxt not in seen:
                stack.append((nxt, total + w, seen | {nxt}))
    return best


@pytest.fixture
def brute_force():
    return _brute_force_distance


@pytest.fixture
def triangle():
    return [("A", "B", 1.0), ("B", "C", 2.0), ("A", "C", 10.0)]


@pytest.fixture
def negative_cycle():
    return [("A", "B", 1.0), ("B", "A", -3.0)]