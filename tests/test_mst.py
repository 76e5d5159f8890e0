import pathlib
import sys

sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1] / "src"))

import numpy as np
import pytest

from cityplan.instance import Instance
from cityplan.mst import boruvka_select, get_strategy, highway_order, kruskal_select
from cityplan.union_find import UnionFind

SELECTORS = [kruskal_select, boruvka_select]


def _run(select, inst):
    uf = UnionFind(inst.n_cities)
    return select(inst, uf), uf


@pytest.mark.parametrize("select", SELECTORS)
def test_path_with_expensive_shortcut(select):
    inst = Instance.build(4, highways=[(1, 2, 1), (2, 3, 2), (3, 4, 3), (1, 4, 10)])
    sel, uf = _run(select, inst)
    assert sel.feasible
    assert sel.cost == 6
    assert sorted(sel.highways) == [0, 1, 2]
    assert uf.n_components == 1


@pytest.mark.parametrize("select", SELECTORS)
def test_disconnected_is_infeasible(select):
    inst = Instance.build(4, highways=[(1, 2, 1), (3, 4, 1)])
    sel, _ = _run(select, inst)
    assert not sel.feasible
    assert sel.cost == 0
    assert sel.highways == ()


@pytest.mark.parametrize("select", SELECTORS)
def test_self_loops_and_parallel_edges(select):
    inst = Instance.build(3, highways=[(1, 1, 0), (1, 2, 5), (2, 1, 3), (2, 3, 4), (3, 2, 4)])
    sel, _ = _run(select, inst)
    assert sel.feasible
    assert sel.cost == 7
    assert sorted(sel.highways) == [2, 3]


def test_order_breaks_ties_by_endpoint_ids():
    inst = Instance.build(4, highways=[(4, 3, 1), (2, 1, 1), (3, 1, 1), (1, 2, 0)])
    np.testing.assert_array_equal(highway_order(inst), [3, 1, 2, 0])


def test_kruskal_stops_once_connected():
    inst = Instance.build(2, highways=[(1, 2, 1), (1, 2, 2)])
    sel, _ = _run(kruskal_select, inst)
    assert sel.highways == (0,)


@pytest.mark.parametrize("select", SELECTORS)
def test_single_component_needs_nothing(select):
    inst = Instance.build(1, highways=[(1, 1, 3)])
    sel, _ = _run(select, inst)
    assert sel.feasible and sel.cost == 0 and sel.count == 0


def test_strategies_pick_the_same_highways_on_ties():
    rng = np.random.default_rng(3)
    for _ in range(25):
        n = int(rng.integers(2, 12))
        m = int(rng.integers(0, 30))
        rows = [(int(a), int(b), int(c)) for a, b, c in zip(
            rng.integers(1, n + 1, m), rng.integers(1, n + 1, m), rng.integers(0, 4, m)
        )]
        inst = Instance.build(n, highways=rows)
        ka, _ = _run(kruskal_select, inst)
        kb, _ = _run(boruvka_select, inst)
        assert ka.feasible == kb.feasible
        assert ka.cost == kb.cost
        assert sorted(ka.highways) == sorted(kb.highways)


def test_boruvka_verbose_prints_rounds(capsys):
    inst = Instance.build(3, highways=[(1, 2, 1), (2, 3, 1)])
    uf = UnionFind(3)
    boruvka_select(inst, uf, verbose=True)
    assert "round 1" in capsys.readouterr().out


def test_get_strategy():
    assert get_strategy("Kruskal") is kruskal_select
    assert get_strategy("boruvka") is boruvka_select
    with pytest.raises(ValueError, match="unknown strategy"):
        get_strategy("prim")


@pytest.mark.parametrize("name", [None, 3, ["kruskal"]])
def test_get_strategy_rejects_non_string_names(name):
    with pytest.raises(ValueError, match="unknown strategy"):
        get_strategy(name)
