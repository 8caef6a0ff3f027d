import logging
from pathlib import Path

import pandas as pd

from .engine import PathStatus
from .errors import MalformedInputError
from .graph import INF

logger = logging.getLogger(__name__)

COLUMNS = ["edge_1", "edge_2", "length"]


def edges_from_frame(df):
    if list(df.columns) != COLUMNS:
        raise MalformedInputError(f"expected columns {COLUMNS}, got {list(df.columns)}")
    if df[["edge_1", "edge_2"]].isna().values.any():
        raise MalformedInputError("missing vertex label in edge list")
    lengths = pd.to_numeric(df["length"], errors="coerce")
    if lengths.isna().any():
        bad = df.loc[lengths.isna(), "length"].tolist()
        raise MalformedInputError(f"non-numeric edge lengths: {bad}")
    return list(zip(df["edge_1"].tolist(), df["edge_2"].tolist(), lengths.astype(float).tolist()))


def _read_text(path):
    with path.open("r") as f:
        header = f.readline().strip()
    try:
        n = int(header)
    except ValueError:
        raise MalformedInputError(f"{path}: first line must be the edge count, got {header!r}")
    if n == 0:
        return pd.DataFrame(columns=COLUMNS)
    try:
        df = pd.read_csv(path, sep=r"\s+", header=None, skiprows=1, nrows=n)
    except (pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        raise MalformedInputError(f"{path}: {e}")
    if df.shape[1] != len(COLUMNS):
        raise MalformedInputError(f"{path}: expected {len(COLUMNS)} fields per edge, got {df.shape[1]}")
    df.columns = COLUMNS
    if len(df) != n:
        raise MalformedInputError(f"{path}: expected {n} edges, found {len(df)}")
    return df


def load_edges(path):
    """
    Read an edge list.

    `.csv` files need an `edge_1,edge_2,length` header. Anything else is the
    plain text layout: the edge count on the first line, then one
    `source destination weight` line per edge.
    """
    path = Path(path)
    if not path.exists():
        raise MalformedInputError(f"file not found: {path}")
    if path.suffix == ".csv":
        try:
            df = pd.read_csv(path)
        except (pd.errors.ParserError, pd.errors.EmptyDataError) as e:
            raise MalformedInputError(f"{path}: {e}")
    else:
        df = _read_text(path)
    edges = edges_from_frame(df)
    logger.info("loaded %d edges from %s", len(edges), path)
    return edges


def format_path(result):
    if result.status is PathStatus.REACHED:
        return "->".join(str(v) for v in result.path)
    if result.status is PathStatus.CYCLE_DETECTED:
        return "CYCLE"
    return ""


def distance_report(engine, with_paths=False):
    rows = []
    for u, v, d, result in engine.all_pairs(with_paths=with_paths):
        row = [u, v, d]
        if with_paths:
            row.append(format_path(result))
        rows.append(row)
    columns = COLUMNS + ["path"] if with_paths else COLUMNS
    return pd.DataFrame(rows, columns=columns)


def write_report(df, path):
    path = Path(path)
    out = df.copy()
    if path.suffix == ".csv":
        out["length"] = out["length"].map(lambda d: "INF" if d == INF else d)
        out.to_csv(path, index=False)
        return
    # stream-style numbers in the text report
    out["length"] = out["length"].map(lambda d: "INF" if d == INF else f"{d:g}")
    with path.open("w") as f:
        for row in out.itertuples(index=False):
            line = f"from: {row.edge_1} to: {row.edge_2} - {row.length}"
            if "path" in out.columns and row.path:
                line += f" path: {row.path}"
            f.write(line + "\n")
