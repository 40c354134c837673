"""Command-line entry point: read problems, break cycles, write answers."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Iterator, Sequence

from cyclebreak.solver import Edge, break_cycles
from cyclebreak.usage import UsageMeter


class InputFormatError(ValueError):
    """The input text does not follow the problem format."""


@dataclass
class Problem:
    """One graph to break cycles in."""

    directed: bool
    n: int
    edges: list[Edge] = field(default_factory=list)


def _next_int(tokens: Iterator[str], what: str) -> int:
    token = next(tokens, None)
    if token is None:
        raise InputFormatError(f"input ended while reading {what}")
    try:
        return int(token)
    except ValueError:
        raise InputFormatError(f"expected an integer for {what}, got {token!r}") from None


def parse_problems(text: str) -> list[Problem]:
    """Parse problems until a '0' marker or the end of the text."""
    tokens = iter(text.split())
    problems = []
    for kind in tokens:
        if kind == "0":
            break
        n = _next_int(tokens, "vertex count")
        m = _next_int(tokens, "edge count")
        if n < 0 or m < 0:
            raise InputFormatError(f"negative problem size: {n} {m}")
        edges = [
            Edge(
                _next_int(tokens, "edge"),
                _next_int(tokens, "edge"),
                _next_int(tokens, "edge weight"),
            )
            for _ in range(m)
        ]
        problems.append(Problem(kind == "d", n, edges))
    return problems


def run(text: str) -> str:
    """Solve every problem in the text and return the joined answers."""
    try:
        return "".join(
            break_cycles(p.n, p.edges, p.directed).format() for p in parse_problems(text)
        )
    except InputFormatError:
        raise
    except ValueError as exc:
        raise InputFormatError(str(exc)) from exc


def main(argv: Sequence[str] | None = None) -> int:
    """Run as: cb <input file> <output file>."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        print("Error: incorrect number of arguments.")
        return 1
    meter = UsageMeter()
    input_path, output_path = args
    try:
        with open(input_path) as fin:
            text = fin.read()
    except OSError:
        print("Error: input file format error.")
        return 1
    try:
        fout = open(output_path, "w")
    except OSError:
        print("Error: cannot open output file.")
        return 1
    with fout:
        try:
            fout.write(run(text))
        except InputFormatError:
            print("Error: input file format error.")
            return 1

    try:
        stat = meter.period_usage()
    except OSError as exc:
        print(f"**ERROR {exc}", file=sys.stderr)
    else:
        print(f"The total CPU time: {stat.cpu_time / 1000.0:g}ms")
        print(f"Memory: {stat.vm_peak}KB")
    return 0