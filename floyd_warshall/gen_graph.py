import argparse

import numpy as np
import pandas as pd

from .edges_io import COLUMNS


def get_parser():
    parser = argparse.ArgumentParser()
    parser.add_argument("--nodes", type=int, default=100)
    parser.add_argument("--prob", type=float, default=0.25, help="probability of dropping each edge")
    parser.add_argument("--max_w", type=int, default=1)
    parser.add_argument("--min_w", type=int, default=1)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--no_loops", action="store_true")
    parser.add_argument("--output", type=str, required=True)
    return parser


def gen_graph(nodes, prob, max_w, min_w=1, seed=None, loops=True):
    rng = np.random.RandomState(seed)
    xs, ys = np.meshgrid(np.arange(nodes), np.arange(nodes))
    ws = rng.randint(min_w, max_w + 1, size=xs.shape)
    ps = rng.binomial(1, prob, size=xs.shape)
    keep = ps.flatten() == 0
    if not loops:
        keep &= (xs != ys).flatten()
    df = pd.DataFrame({
        "edge_1": xs.flatten()[keep],
        "edge_2": ys.flatten()[keep],
        "length": ws.flatten()[keep],
    })
    return df[COLUMNS]


if __name__ == "__main__":
    parser = get_parser()
    args = parser.parse_args()
    assert args.output.endswith(".csv")
    df = gen_graph(args.nodes, args.prob, args.max_w, args.min_w, args.seed, not args.no_loops)
    df.to_csv(args.output, sep=",", index=False)
