import pathlib
import sys

sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1] / "src"))

import numpy as np

from cityplan.ports import merge_ports, port_summary
from cityplan.union_find import UnionFind


def test_port_summary_counts_positive_costs():
    assert port_summary(np.array([0, 5, 0, 3])) == (2, 8)
    assert port_summary(np.array([], dtype=np.int64)) == (0, 0)


def test_ports_collapse_into_one_component():
    costs = np.array([4, 0, 2, 0, 9])
    uf = UnionFind(5, preferred=costs > 0)
    assert merge_ports(uf, costs) == 2
    assert uf.connected(0, 2)
    assert uf.connected(2, 4)
    assert not uf.connected(0, 1)
    # n_cities - (ports_count - 1)
    assert uf.n_components == 5 - (3 - 1)


def test_second_merge_is_noop():
    costs = np.array([1, 1, 0, 1])
    uf = UnionFind(4, preferred=costs > 0)
    merge_ports(uf, costs)
    parent = uf.parent.copy()
    size = uf.size.copy()
    assert merge_ports(uf, costs) == 0
    np.testing.assert_array_equal(uf.parent, parent)
    np.testing.assert_array_equal(uf.size, size)


def test_no_ports_leaves_forest_alone():
    uf = UnionFind(3)
    assert merge_ports(uf, np.zeros(3, dtype=np.int64)) == 0
    assert uf.n_components == 3


def test_hub_survives_merge_with_plain_city_of_equal_size():
    costs = np.array([0, 0, 6])
    uf = UnionFind(3, preferred=costs > 0)
    merge_ports(uf, costs)
    uf.union(0, 2)
    assert uf.find(0) == 2


def test_verbose_reports_hub(capsys):
    costs = np.array([0, 3, 3])
    merge_ports(UnionFind(3), costs, verbose=True)
    assert "city 2" in capsys.readouterr().out


def test_port_summary_does_not_wrap_large_totals():
    costs = np.array([2**62, 0, 2**62], dtype=np.int64)
    assert port_summary(costs) == (2, 2**63)
