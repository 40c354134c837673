import io
import random

import pytest

from cyclebreak.generator import generate_directed, generate_undirected, main


def parse(text):
    lines = text.splitlines()
    kind = lines[0]
    n, m = map(int, lines[1].split())
    edges = [tuple(map(int, line.split())) for line in lines[2:-1]]
    return kind, n, m, edges, lines[-1]


def test_undirected_output_shape():
    out = io.StringIO()
    generate_undirected(out, 10, 20, random.Random(1))
    kind, n, m, edges, last = parse(out.getvalue())
    assert (kind, n, m, last) == ("u", 10, 20, "0")
    assert len(edges) == m
    pairs = {(u, v) for u, v, _ in edges}
    assert len(pairs) == m
    assert all(0 <= u < v < n for u, v in pairs)
    assert all(-1000 <= w <= 1000 for _, _, w in edges)


def test_directed_output_shape():
    out = io.StringIO()
    generate_directed(out, 6, 30, random.Random(2))
    kind, n, m, edges, last = parse(out.getvalue())
    assert (kind, n, m, last) == ("d", 6, 30, "0")
    pairs = {(u, v) for u, v, _ in edges}
    assert len(pairs) == len(edges) == m
    assert all(u != v and 0 <= u < n and 0 <= v < n for u, v in pairs)
    assert all(-1000 <= w <= 1000 for _, _, w in edges)


def test_same_seed_same_output():
    first, second = io.StringIO(), io.StringIO()
    generate_undirected(first, 8, 12, random.Random(5))
    generate_undirected(second, 8, 12, random.Random(5))
    assert first.getvalue() == second.getvalue()


def test_too_many_edges_rejected():
    with pytest.raises(ValueError):
        generate_undirected(io.StringIO(), 4, 7, random.Random(0))
    with pytest.raises(ValueError):
        generate_directed(io.StringIO(), 4, 13, random.Random(0))


def test_complete_graph_is_reachable():
    out = io.StringIO()
    generate_directed(out, 4, 12, random.Random(3))
    _, _, _, edges, _ = parse(out.getvalue())
    assert {(u, v) for u, v, _ in edges} == {
        (u, v) for u in range(4) for v in range(4) if u != v
    }


def test_main_writes_file(tmp_path):
    target = tmp_path / "inputs" / "g.in"
    code = main([str(target), "--directed", "-n", "5", "-m", "8", "--seed", "4"])
    assert code == 0
    kind, n, m, edges, last = parse(target.read_text())
    assert (kind, n, m, len(edges), last) == ("d", 5, 8, 8, "0")


def test_main_reports_impossible_size(tmp_path):
    assert main([str(tmp_path / "x.in"), "-n", "3", "-m", "9"]) == 1