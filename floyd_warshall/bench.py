import argparse
import os
import time

from .engine import ShortestPaths
from .edges_io import edges_from_frame
from .gen_graph import gen_graph
from .graph import Graph


class style():
    GREEN = '\033[32m'
    BLUE = '\033[34m'
    RESET = '\033[0m'


def colored_txt(s, color):
    return color + str(s) + style.RESET


def get_parser():
    parser = argparse.ArgumentParser()
    parser.add_argument("--sizes", type=int, nargs="+", default=[10, 50, 100])
    parser.add_argument("--prob", type=float, default=0.25)
    parser.add_argument("--max_w", type=int, default=20)
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--log", type=str, default=os.path.join("logs", "times.txt"))
    return parser


def _append(log_file, line):
    dirname = os.path.dirname(log_file)
    if dirname:
        os.makedirs(dirname, exist_ok=True)
    with open(log_file, "a") as f:
        f.write(line + "\n")


def log_time(log_file, name, seconds):
    _append(log_file, f"{name}, {seconds}")


def time_run(edges):
    engine = ShortestPaths(Graph.from_edges(edges))
    start = time.time()
    engine.relax_all()
    end = time.time()
    return engine, end - start


def run(sizes, prob, max_w, seed, log):
    _append(log, "=========================")
    timings = []
    for nodes in sizes:
        edges = edges_from_frame(gen_graph(nodes, prob, max_w, seed=seed))
        _, seconds = time_run(edges)
        log_time(log, f"{nodes} nodes / {len(edges)} edges", seconds)
        print(colored_txt(f"{nodes} nodes, {len(edges)} edges", style.BLUE), colored_txt(f"time = {seconds}", style.GREEN))
        timings.append((nodes, len(edges), seconds))
    return timings


if __name__ == "__main__":
    parser = get_parser()
    args = parser.parse_args()
    run(args.sizes, args.prob, args.max_w, args.seed, args.log)
