import logging

import pytest

from scalar_aad.aad import ADVar, backward, build_topo, zero_adjoints


def test_add():
    a = ADVar(1.0)
    b = ADVar(2.0)
    c = a + b
    d = c + b
    d.backward()
    assert b.get_grad() == 2.0
    assert a.get_grad() == 1.0


def test_sub():
    a = ADVar(1.0)
    b = ADVar(2.0)
    c = a - b
    d = c - b
    d.backward()
    assert b.get_grad() == -2.0


def test_mul():
    a = ADVar(1.0)
    b = ADVar(2.0)
    c = a + b
    d = c * b
    d.backward()
    assert b.get_grad() == 5.0
    assert a.get_grad() == 2.0


def test_mul_neg():
    a = ADVar(1.0)
    b = ADVar(2.0)
    c = a - b
    d = c * b
    d.backward()
    assert b.get_grad() == -3.0


def test_pow():
    a = ADVar(1.0)
    b = ADVar(2.0)
    c = a + b
    d = c.pow(2.0)
    d.backward()
    assert b.get_grad() == 6.0


def test_relu():
    a = ADVar(1.0)
    b = ADVar(2.0)
    c = a + (b * 2.0)
    d = c.relu()
    e = d * 2.0
    e.backward()
    assert b.get_grad() == 4.0


def test_relu_neg():
    a = ADVar(1.0)
    b = ADVar(2.0)
    c = a - (b * 2.0)
    d = c.relu()
    e = d * 2.0
    e.backward()
    assert d.get_data() == 0.0
    assert b.get_grad() == 0.0


def test_div():
    a = ADVar(1.0)
    b = ADVar(2.0)
    c = a + b
    d = c / b
    d.backward()
    assert b.get_grad() == -0.25


def test_contrived_expression():
    a = ADVar(-4.0)
    b = ADVar(2.0)
    c = a + b
    d = a * b + b.pow(3.0)
    c = c + c + 1.0
    c = c + 1.0 + c + (-a)
    d = d + d * 2.0 + (b + a).relu()
    d = d + d * 3.0 + (b - a).relu()
    e = c - d
    f = e.pow(2.0)
    g = f / 2.0
    g = g + 10.0 / f
    assert g.get_data() == pytest.approx(24.7041, abs=1e-3)
    g.backward()
    assert a.get_grad() == pytest.approx(138.8338, abs=1e-3)
    assert b.get_grad() == pytest.approx(645.5773, abs=1e-3)


def test_diamond_accumulates_both_paths():
    x = ADVar(3.0)
    left = x * 2.0          # d/dx = 2
    right = x * x           # d/dx = 2x = 6
    out = left + right
    out.backward()
    assert x.get_grad() == 8.0


def test_same_operand_twice():
    x = ADVar(3.0)
    (x + x).backward()
    assert x.get_grad() == 2.0

    y = ADVar(3.0)
    (y * y).backward()
    assert y.get_grad() == 6.0


def test_backward_seeds_terminal_with_one():
    x = ADVar(2.0)
    y = x * 3.0
    y.set_grad(5.0)
    backward(y)
    assert y.get_grad() == 1.0
    assert x.get_grad() == 3.0


def test_gradients_accumulate_without_reset():
    x = ADVar(2.0)
    (x * 3.0).backward()
    (x * 3.0).backward()
    assert x.get_grad() == 6.0

    zero_adjoints([x])
    (x * 3.0).backward()
    assert x.get_grad() == 3.0


def test_build_topo_parents_first_and_unique():
    x = ADVar(1.0)
    a = x * 2.0
    b = x + 1.0
    c = a * b
    topo = build_topo(c)

    assert topo[-1] is c
    assert sum(1 for v in topo if v is x) == 1
    assert len({id(v) for v in topo}) == len(topo)
    position = {id(v): i for i, v in enumerate(topo)}
    for v in topo:
        for p in v.parents:
            assert position[id(p)] < position[id(v)]


def test_build_topo_matches_recursive_order():
    def recursive(root):
        topo, visited = [], set()

        def visit(v):
            if id(v) in visited:
                return
            visited.add(id(v))
            for p in v.parents:
                visit(p)
            topo.append(v)

        visit(root)
        return topo

    a = ADVar(-4.0)
    b = ADVar(2.0)
    c = a * b + b.pow(3.0)
    d = (c + a).relu() * (c - b) + c / b
    assert [id(v) for v in build_topo(d)] == [id(v) for v in recursive(d)]


def test_equal_values_are_distinct_nodes():
    x = ADVar(2.0)
    y = ADVar(2.0)
    out = x * y
    out.backward()
    assert len(build_topo(out)) == 3
    assert x.get_grad() == 2.0
    assert y.get_grad() == 2.0


def test_deep_chain_does_not_recurse():
    x = ADVar(1.0)
    y = x
    for _ in range(5000):
        y = y * 1.0
    y.backward()
    assert x.get_grad() == 1.0


def test_unreachable_nodes_untouched():
    x = ADVar(1.0)
    other = x * 4.0
    y = x + 2.0
    y.backward()
    assert other.get_grad() == 0.0
    assert x.get_grad() == 1.0


def test_backward_logs_node_count(caplog):
    caplog.set_level(logging.DEBUG, logger="scalar_aad.aad.core.engine")
    x = ADVar(1.0)
    (x * x).backward()
    assert "backward: 2 nodes" in caplog.text
