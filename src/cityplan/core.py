from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterable

from joblib import Parallel, delayed

from .instance import Instance
from .mst import DEFAULT_STRATEGY, Selection, get_strategy
from .ports import merge_ports, port_summary
from .union_find import UnionFind

N_CPU = max(1, os.cpu_count() or 1)


@dataclass(frozen=True)
class Plan:
    """Final report of a planning run.

    ``total_cost`` includes every declared port plus the selected highways.
    ``highways`` lists the input positions of the selected highways. Both are
    left at zero/empty when the instance cannot be connected.
    """

    feasible: bool
    total_cost: int
    ports_count: int
    highways_used: int
    highways: tuple[int, ...] = ()
    strategy: str = DEFAULT_STRATEGY

    @classmethod
    def from_selection(cls, selection: Selection, ports_count: int, port_total: int, strategy: str) -> "Plan":
        if not selection.feasible:
            return cls(False, 0, 0, 0, (), strategy)
        return cls(
            True,
            port_total + selection.cost,
            ports_count,
            selection.count,
            selection.highways,
            strategy,
        )

    def summary(self) -> tuple[int, int, int] | None:
        if not self.feasible:
            return None
        return self.total_cost, self.ports_count, self.highways_used


def plan_city(instance: Instance, strategy: str = DEFAULT_STRATEGY, verbose: bool = False) -> Plan:
    select = get_strategy(strategy)
    uf = UnionFind(instance.n_cities, preferred=instance.port_mask)
    ports_count, port_total = port_summary(instance.port_costs)
    merge_ports(uf, instance.port_costs, verbose=verbose)
    if verbose:
        print(f"Cities={instance.n_cities} highways={instance.n_highways} components after ports={uf.n_components}")
    selection = select(instance, uf, verbose)
    plan = Plan.from_selection(selection, ports_count, port_total, strategy.lower())
    if verbose:
        if plan.feasible:
            print(f"Plan: cost {plan.total_cost}, {plan.ports_count} ports, {plan.highways_used} highways")
        else:
            print("Plan: impossible")
    return plan


def plan_many(
    instances: Iterable[Instance],
    strategy: str = DEFAULT_STRATEGY,
    n_jobs: int | None = None,
    verbose: bool = False,
) -> list[Plan]:
    """Plan independent instances in parallel, keeping input order."""
    get_strategy(strategy)
    jobs = N_CPU if n_jobs is None else n_jobs
    return Parallel(n_jobs=jobs, prefer="processes")(
        delayed(plan_city)(inst, strategy, verbose) for inst in instances
    )


__all__ = ["Plan", "plan_city", "plan_many"]
