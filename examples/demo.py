"""Small demonstration of the CityPlan planner on random instances."""

from __future__ import annotations

import numpy as np

from cityplan import Instance, plan_city, plan_many
from cityplan.io import format_plan


def make_instance(seed: int = 0, n_cities: int = 40, n_highways: int = 120) -> Instance:
    rng = np.random.default_rng(seed)
    port_cities = rng.choice(n_cities, size=n_cities // 10, replace=False) + 1
    ports = [(int(c), int(rng.integers(5, 30))) for c in port_cities]
    ends = rng.integers(1, n_cities + 1, size=(n_highways, 2))
    costs = rng.integers(1, 20, size=n_highways)
    highways = [(int(a), int(b), int(c)) for (a, b), c in zip(ends, costs)]
    return Instance.build(n_cities, ports, highways)


def main() -> None:
    instance = make_instance()
    for strategy in ("kruskal", "boruvka"):
        plan = plan_city(instance, strategy=strategy, verbose=True)
        print(f"[{strategy}]")
        print(format_plan(plan), end="")

    batch = [make_instance(seed) for seed in range(8)]
    plans = plan_many(batch)
    print("Batch:", [p.summary() for p in plans])


if __name__ == "__main__":
    main()
