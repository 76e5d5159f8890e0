"""Port hub rule: every ported city shares one free connection."""

from __future__ import annotations

import numpy as np

from .union_find import UnionFind


def port_summary(port_costs: np.ndarray) -> tuple[int, int]:
    """Number of cities with a port and the total paid for them."""
    costs = np.asarray(port_costs, dtype=np.int64)
    mask = costs > 0
    # Python ints so large totals cannot wrap around
    return int(mask.sum()), sum(int(c) for c in costs[mask])


def merge_ports(uf: UnionFind, port_costs: np.ndarray, verbose: bool = False) -> int:
    """Union all ported cities into the component of the first one.

    Returns the number of unions performed, so a repeated call on the same
    forest returns 0.
    """
    ported = np.flatnonzero(np.asarray(port_costs) > 0)
    if ported.size == 0:
        return 0
    hub = int(ported[0])
    merged = 0
    for city in ported[1:]:
        if uf.union(hub, int(city)):
            merged += 1
    if verbose:
        print(f"Port hub: city {hub + 1}, {ported.size} ports, {merged} merges")
    return merged


__all__ = ["merge_ports", "port_summary"]
