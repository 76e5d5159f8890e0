from __future__ import annotations

import operator
import os
from dataclasses import dataclass
from typing import Any, Iterable, Sequence

import numpy as np

MAX_CITIES = 100_000
MAX_HIGHWAYS = 1_000_000
MAX_COST = 10**12
_INT64_MAX = int(np.iinfo(np.int64).max)


class InstanceError(ValueError):
    """Raised when a problem instance is malformed or exceeds the capacity limits."""


def resolve_limit(value: int | None, env_name: str, default: int) -> int:
    if value is not None:
        return int(value)
    raw = os.environ.get(env_name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise InstanceError(f"{env_name} must be an integer, got {raw!r}") from exc


def _as_int(value: Any, what: str) -> int:
    try:
        return operator.index(value)
    except TypeError:
        raise InstanceError(f"{what} must be an integer, got {value!r}") from None


@dataclass(frozen=True, eq=False)
class Instance:
    """Cities, ports and candidate highways of one planning problem.

    City ``i`` (1-based id) lives at index ``i - 1`` of ``port_costs``.
    Highway endpoints are stored 0-based in ``city_a``/``city_b``.
    Build instances through :meth:`build` so the arrays are validated.
    """

    n_cities: int
    port_costs: np.ndarray
    city_a: np.ndarray
    city_b: np.ndarray
    costs: np.ndarray

    @property
    def n_highways(self) -> int:
        return int(self.costs.shape[0])

    @property
    def port_mask(self) -> np.ndarray:
        return self.port_costs > 0

    def highway(self, index: int) -> tuple[int, int, int]:
        """Highway ``index`` as ``(city_a, city_b, cost)`` with 1-based city ids."""
        return int(self.city_a[index]) + 1, int(self.city_b[index]) + 1, int(self.costs[index])

    def with_highway(self, city_a: int, city_b: int, cost: int, *, max_cost: int | None = None) -> "Instance":
        """Copy of this instance with one more candidate highway appended."""
        max_cost = resolve_limit(max_cost, "CITYPLAN_MAX_COST", MAX_COST)
        city_a, city_b, cost = _check_highway(self.n_cities, (city_a, city_b, cost), max_cost)
        return Instance(
            n_cities=self.n_cities,
            port_costs=self.port_costs,
            city_a=np.append(self.city_a, np.int64(city_a - 1)),
            city_b=np.append(self.city_b, np.int64(city_b - 1)),
            costs=np.append(self.costs, np.int64(cost)),
        )

    @classmethod
    def build(
        cls,
        n_cities: int,
        ports: Iterable[Sequence[int]] = (),
        highways: Iterable[Sequence[int]] = (),
        *,
        max_cities: int | None = None,
        max_highways: int | None = None,
        max_cost: int | None = None,
    ) -> "Instance":
        """Validate raw declarations and pack them into arrays.

        ``ports`` holds ``(city_id, port_cost)`` pairs and ``highways`` holds
        ``(city_a, city_b, cost)`` triples, all with 1-based city ids. Every
        value must be an integer; costs must lie in ``0..max_cost``.
        """
        max_cities = resolve_limit(max_cities, "CITYPLAN_MAX_CITIES", MAX_CITIES)
        max_highways = resolve_limit(max_highways, "CITYPLAN_MAX_HIGHWAYS", MAX_HIGHWAYS)
        max_cost = resolve_limit(max_cost, "CITYPLAN_MAX_COST", MAX_COST)
        n_cities = _as_int(n_cities, "number of cities")
        if n_cities < 0:
            raise InstanceError("number of cities must be non-negative")
        if n_cities > max_cities:
            raise InstanceError(f"{n_cities} cities exceed the limit of {max_cities}")

        port_costs = np.zeros(n_cities, dtype=np.int64)
        declared = np.zeros(n_cities, dtype=bool)
        for entry in ports:
            if len(entry) != 2:
                raise InstanceError(f"port declaration must be (city, cost), got {tuple(entry)!r}")
            city = _as_int(entry[0], "port city")
            _check_city(n_cities, city)
            cost = _check_cost(_as_int(entry[1], "port cost"), max_cost, f"port of city {city}")
            if declared[city - 1]:
                raise InstanceError(f"city {city} declares a port more than once")
            declared[city - 1] = True
            port_costs[city - 1] = cost

        rows: list[tuple[int, int, int]] = []
        for h in highways:
            if len(rows) == max_highways:
                raise InstanceError(f"more highways than the limit of {max_highways}")
            rows.append(_check_highway(n_cities, h, max_cost))
        arr = np.asarray(rows, dtype=np.int64).reshape(len(rows), 3)
        return cls(
            n_cities=n_cities,
            port_costs=port_costs,
            city_a=arr[:, 0] - 1,
            city_b=arr[:, 1] - 1,
            costs=arr[:, 2].copy(),
        )


def _check_city(n_cities: int, city: int) -> None:
    if not 1 <= city <= n_cities:
        raise InstanceError(f"city id {city} outside 1..{n_cities}")


def _check_cost(cost: int, max_cost: int, what: str) -> int:
    max_cost = min(max_cost, _INT64_MAX)
    if cost < 0:
        raise InstanceError(f"{what} has negative cost {cost}")
    if cost > max_cost:
        raise InstanceError(f"{what} costs {cost}, above the limit of {max_cost}")
    return cost


def _check_highway(n_cities: int, row: Sequence[Any], max_cost: int) -> tuple[int, int, int]:
    if len(row) != 3:
        raise InstanceError(f"highway must be (city_a, city_b, cost), got {tuple(row)!r}")
    city_a = _as_int(row[0], "highway city")
    city_b = _as_int(row[1], "highway city")
    _check_city(n_cities, city_a)
    _check_city(n_cities, city_b)
    cost = _check_cost(_as_int(row[2], "highway cost"), max_cost, f"highway {city_a}-{city_b}")
    return city_a, city_b, cost


__all__ = ["Instance", "InstanceError", "MAX_CITIES", "MAX_COST", "MAX_HIGHWAYS", "resolve_limit"]
