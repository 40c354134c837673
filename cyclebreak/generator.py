"""Random test-input generator for the cycle-breaking solver."""

from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path
from typing import Sequence, TextIO

_WEIGHT_MIN = -1000
_WEIGHT_MAX = 1000


def generate_undirected(
    out: TextIO,
    n: int = 100_000,
    m: int = 1_000_000,
    rng: random.Random | None = None,
) -> None:
    """Write an undirected problem with m distinct edges over n vertices."""
    if m > n * (n - 1) // 2:
        raise ValueError(f"cannot place {m} distinct edges among {n} vertices")
    rng = rng or random.Random()
    out.write("u\n")
    out.write(f"{n} {m}\n")
    seen: set[tuple[int, int]] = set()
    while len(seen) < m:
        u = rng.randint(0, n - 1)
        v = rng.randint(0, n - 1)
        if u == v:
            continue
        pair = (min(u, v), max(u, v))
        if pair in seen:
            continue
        seen.add(pair)
        if len(seen) % 100_000 == 0:
            print(f"Generated {len(seen)} edges")
        out.write(f"{pair[0]} {pair[1]} {rng.randint(_WEIGHT_MIN, _WEIGHT_MAX)}\n")
    out.write("0\n")


def generate_directed(
    out: TextIO,
    n: int = 50,
    m: int = 100,
    rng: random.Random | None = None,
) -> None:
    """Write a directed problem with m distinct arcs over n vertices."""
    if m > n * (n - 1):
        raise ValueError(f"cannot place {m} distinct arcs among {n} vertices")
    rng = rng or random.Random()
    out.write("d\n")
    out.write(f"{n} {m}\n")
    seen: set[tuple[int, int]] = set()
    while len(seen) < m:
        u = rng.randint(0, n - 1)
        v = rng.randint(0, n - 1)
        if u == v or (u, v) in seen:
            continue
        seen.add((u, v))
        if len(seen) % 1000 == 0:
            print(f"Adding edge: {u} {v}")
        out.write(f"{u} {v} {rng.randint(_WEIGHT_MIN, _WEIGHT_MAX)}\n")
    out.write("0\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Generate a random problem file."""
    parser = argparse.ArgumentParser(description="Generate a random cycle-breaking input.")
    parser.add_argument("output", nargs="?", default="inputs/undirected.in")
    parser.add_argument("--directed", action="store_true", help="generate a directed graph")
    parser.add_argument("-n", "--vertices", type=int)
    parser.add_argument("-m", "--edges", type=int)
    parser.add_argument("--seed", type=int)
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    generate = generate_directed if args.directed else generate_undirected
    sizes = {}
    if args.vertices is not None:
        sizes["n"] = args.vertices
    if args.edges is not None:
        sizes["m"] = args.edges
    path = Path(args.output)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w") as out:
            generate(out, rng=rng, **sizes)
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0