# cyclebreak

Remove a low-weight set of edges from a weighted graph so that no cycles are
left in it.

* **Undirected graphs**: the edges are taken in order of decreasing weight and
  a maximum spanning forest is built with a union-find structure. Every edge
  that would close a cycle is removed. The removed edges have the smallest
  possible total weight.
* **Directed graphs**: a maximum spanning forest is built first. The other
  edges are then tried heaviest first. An edge is put back if its weight is
  not negative and adding it does not create a directed cycle. All other
  edges are removed.

## Installation

```
pip install .
```

The package needs nothing beyond the standard library. The usage
measurement uses the `resource` module and `/proc/self/status`, so it works
on Linux and other POSIX systems.

## Input format

An input file holds one or more problems and ends with a line `0`:

```
u
5 6
0 1 3
1 2 -2
2 0 4
2 3 1
3 4 7
4 2 5
0
```

Each problem starts with `u` (undirected) or `d` (directed). The next line
gives the vertex count `n` and the edge count `m`. After that come `m` lines
of the form `u v w`. The vertices are numbered `0` to `n - 1`. Reading
stops at the `0` line or at the end of the file.

## Command line

```
cyclebreak input.txt output.txt
```

For each problem, the output file gets the total weight of the removed edges
on one line, followed by one line `u v w` for each removed edge. For the
example above the output is:

```
-1
2 3 1
1 2 -2
```

After the run, the CPU time and the peak memory are printed to standard
output. If the memory figures cannot be read, an error is printed to
standard error instead, and the answers are still written.

The command exits with status 1 and prints an error message in these cases:
the number of arguments is not two, the input file cannot be read or is
malformed, or the output file cannot be opened.

### Random inputs

```
cyclebreak-generate [output] [--directed] [-n VERTICES] [-m EDGES] [--seed SEED]
```

This writes one random problem with distinct edges and weights from -1000 to
1000, followed by the closing `0` line. The output path defaults to
`inputs/undirected.in`, and missing directories are created. Without `-n`
and `-m`, an undirected graph has 100000 vertices and 1000000 edges, and a
directed graph has 50 vertices and 100 edges. Progress lines are printed
while a large graph is being generated.

## Library use

```python
from cyclebreak.solver import Edge, break_cycles

edges = [Edge(0, 1, 3), Edge(1, 2, -2), Edge(2, 0, 4)]
solution = break_cycles(3, edges, directed=False)
print(solution.total)     # -2
print(solution.format())  # "-2\n1 2 -2\n"
```

* `cyclebreak.solver`: `solve_undirected(n, edges)`, `solve_directed(n, edges)`
  and `break_cycles(n, edges, directed)` return a `Solution` with `total` and
  `removed`. An edge with a vertex outside `0..n-1`, or a negative `n`,
  raises `ValueError`. `DisjointSet` is the union-find structure that the
  solvers use.
* `cyclebreak.cli`: `parse_problems(text)` reads the input format into
  `Problem` objects, and `run(text)` returns the whole output text.
  Malformed input raises `InputFormatError`.
* `cyclebreak.generator`: `generate_undirected(out, n, m, rng)` and
  `generate_directed(out, n, m, rng)` write a random problem to a text
  stream. They take an optional `random.Random`.
* `cyclebreak.usage`: `UsageMeter` measures the CPU time, wall time and
  memory used since `total_start()` or `period_start()`. The results come
  back as `UsageStat` values from `total_usage()` and `period_usage()`.

## Running the tests

```
pip install .[test]
pytest
```