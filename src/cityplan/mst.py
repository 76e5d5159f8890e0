from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

import numpy as np

from .instance import Instance
from .union_find import UnionFind


@dataclass(frozen=True)
class Selection:
    """Outcome of a spanning selection: highway cost only, ports excluded."""

    feasible: bool
    cost: int
    highways: tuple[int, ...]

    @property
    def count(self) -> int:
        return len(self.highways)


def highway_order(instance: Instance) -> np.ndarray:
    """Positions of the highways sorted by cost, lower id, higher id, input position."""
    lo = np.minimum(instance.city_a, instance.city_b)
    hi = np.maximum(instance.city_a, instance.city_b)
    pos = np.arange(instance.n_highways, dtype=np.int64)
    return np.lexsort((pos, hi, lo, instance.costs))


def kruskal_select(instance: Instance, uf: UnionFind, verbose: bool = False) -> Selection:
    if uf.n_components <= 1:
        return Selection(True, 0, ())
    order = highway_order(instance)
    city_a = instance.city_a[order]
    city_b = instance.city_b[order]
    costs = instance.costs[order]
    taken: list[int] = []
    total = 0
    for i in range(order.size):
        if not uf.union(int(city_a[i]), int(city_b[i])):
            continue
        taken.append(int(order[i]))
        total += int(costs[i])
        if uf.n_components == 1:
            break
    feasible = uf.n_components <= 1
    if verbose:
        print(f"Kruskal: {len(taken)} highways, cost {total}, components left {uf.n_components}")
    return Selection(feasible, total if feasible else 0, tuple(taken) if feasible else ())


def boruvka_select(instance: Instance, uf: UnionFind, verbose: bool = False) -> Selection:
    if uf.n_components <= 1:
        return Selection(True, 0, ())
    order = highway_order(instance)
    rank = np.empty(order.size, dtype=np.int64)
    rank[order] = np.arange(order.size, dtype=np.int64)
    city_a = instance.city_a
    city_b = instance.city_b
    costs = instance.costs
    taken: list[int] = []
    total = 0
    n = len(uf)
    rounds = 0
    while uf.n_components > 1:
        rounds += 1
        roots = uf.roots()
        ra = roots[city_a]
        rb = roots[city_b]
        # cheapest[r] holds the rank of the best crossing highway of component r
        cheapest = np.full(n, -1, dtype=np.int64)
        for e in np.flatnonzero(ra != rb):
            r = int(rank[e])
            for root in (int(ra[e]), int(rb[e])):
                if cheapest[root] == -1 or r < cheapest[root]:
                    cheapest[root] = r
        best = np.unique(cheapest[cheapest >= 0])
        if best.size == 0:
            break
        merged = 0
        for r in best:
            e = int(order[r])
            if not uf.union(int(city_a[e]), int(city_b[e])):
                continue
            taken.append(e)
            total += int(costs[e])
            merged += 1
        if verbose:
            print(f"Boruvka round {rounds}: {merged} merges, components left {uf.n_components}")
        if merged == 0:
            break
    feasible = uf.n_components <= 1
    if verbose:
        print(f"Boruvka: {len(taken)} highways, cost {total}, {rounds} rounds")
    return Selection(feasible, total if feasible else 0, tuple(taken) if feasible else ())


STRATEGIES: dict[str, Callable[[Instance, UnionFind, bool], Selection]] = {
    "kruskal": kruskal_select,
    "boruvka": boruvka_select,
}

DEFAULT_STRATEGY = "kruskal"


def get_strategy(name: str) -> Callable[[Instance, UnionFind, bool], Selection]:
    try:
        return STRATEGIES[name.lower()]
    except (AttributeError, KeyError):
        raise ValueError(f"unknown strategy {name!r}, expected one of {sorted(STRATEGIES)}") from None


__all__ = ["DEFAULT_STRATEGY", "STRATEGIES", "Selection", "boruvka_select", "get_strategy", "highway_order", "kruskal_select"]
