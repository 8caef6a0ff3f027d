import pandas as pd
import pytest

from floyd_warshall.__main__ import main
from floyd_warshall.bench import run
from floyd_warshall.gen_graph import gen_graph


def test_cli_writes_report(tmp_path):
    inp = tmp_path / "graph.csv"
    inp.write_text("edge_1,edge_2,length\n0,1,1\n1,2,2\n0,2,10\n")
    out = tmp_path / "out.csv"
    times = tmp_path / "logs" / "times.txt"
    assert main([str(inp), str(out), "--paths", "--log_times", str(times)]) == 0

    df = pd.read_csv(out, dtype=str)
    row = df[(df["edge_1"] == "0") & (df["edge_2"] == "2")].iloc[0]
    assert row["length"] == "3.0"
    assert row["path"] == "0->1->2"
    assert times.read_text().startswith("graph.csv, ")


def test_cli_text_format(tmp_path):
    inp = tmp_path / "graph.txt"
    inp.write_text("2\n0 1 1\n1 0 -3\n")
    out = tmp_path / "out.txt"
    assert main([str(inp), str(out), "--paths"]) == 0
    assert out.read_text().splitlines() == [
        "from: 0 to: 1 - -1 path: CYCLE",
        "from: 1 to: 0 - -5 path: CYCLE",
    ]


def test_cli_malformed_input(tmp_path):
    inp = tmp_path / "graph.csv"
    inp.write_text("a,b\n0,1\n")
    with pytest.raises(SystemExit) as exc:
        main([str(inp), str(tmp_path / "out.csv")])
    assert exc.value.code == 2


def test_gen_graph_without_loops():
    df = gen_graph(10, 0.3, 5, seed=0, loops=False)
    assert list(df.columns) == ["edge_1", "edge_2", "length"]
    assert not (df["edge_1"] == df["edge_2"]).any()
    assert df["length"].between(1, 5).all()
    assert df.equals(gen_graph(10, 0.3, 5, seed=0, loops=False))


def test_bench_logs_times(tmp_path):
    log = tmp_path / "logs" / "times.txt"
    timings = run([4, 8], 0.3, 5, 0, str(log))
    assert [t[0] for t in timings] == [4, 8]
    lines = log.read_text().splitlines()
    assert lines[0] == "========================="
    assert len(lines) == 3


def test_cli_ragged_text_input(tmp_path):
    inp = tmp_path / "graph.txt"
    inp.write_text("2\n0 1 1\n0 1 1 1 1\n")
    with pytest.raises(SystemExit) as exc:
        main([str(inp), str(tmp_path / "out.txt")])
    assert exc.value.code == 2


def test_bench_times_relaxation_only(monkeypatch):
    from types import SimpleNamespace

    from floyd_warshall import bench

    events = []
    from_edges = bench.Graph.from_edges

    def build(edges):
        events.append("build")
        return from_edges(edges)

    def clock():
        events.append("clock")
        return 0.0

    monkeypatch.setattr(bench.Graph, "from_edges", build)
    monkeypatch.setattr(bench, "time", SimpleNamespace(time=clock))
    engine, seconds = bench.time_run([(0, 1, 1.0), (1, 2, 1.0)])
    assert events == ["build", "clock", "clock"]
    assert seconds == 0.0
    assert engine.distance(0, 2) == 2
