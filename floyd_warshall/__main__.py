import argparse
import logging
import os
import time

from .bench import log_time
from .edges_io import distance_report, load_edges, write_report
from .engine import ShortestPaths
from .errors import MalformedInputError
from .graph import Graph

logger = logging.getLogger("floyd_warshall")


def get_parser():
    parser = argparse.ArgumentParser(prog="floyd_warshall")
    parser.add_argument("input", type=str)
    parser.add_argument("output", type=str)
    parser.add_argument("--paths", action="store_true", help="add one shortest path per pair")
    parser.add_argument("--log_times", type=str, default=None, help="append relaxation time to this file")
    parser.add_argument("--verbose", action="store_true")
    return parser


def main(argv=None):
    parser = get_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        edges = load_edges(args.input)
    except MalformedInputError as e:
        parser.error(str(e))

    engine = ShortestPaths(Graph.from_edges(edges))
    start = time.time()
    engine.relax_all()
    end = time.time()
    logger.info("%d vertices relaxed in %.3fs", len(engine.graph), end - start)
    if args.log_times:
        log_time(args.log_times, os.path.basename(args.input), end - start)

    df = distance_report(engine, with_paths=args.paths)
    write_report(df, args.output)
    if args.paths:
        cycles = int((df["path"] == "CYCLE").sum())
        if cycles:
            logger.warning("%d pairs could not be reconstructed (negative cycle)", cycles)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
