"""Plain-text instance reader and plan writer."""

from __future__ import annotations

from typing import Iterator, TextIO

import numpy as np

from .core import Plan
from .instance import MAX_HIGHWAYS, Instance, InstanceError, resolve_limit

IMPOSSIBLE = "Impossible"


def _tokens(text: str) -> Iterator[int]:
    for tok in text.split():
        try:
            yield int(tok)
        except ValueError as exc:
            raise InstanceError(f"expected an integer, got {tok!r}") from exc


def _take(it: Iterator[int], what: str) -> int:
    try:
        return next(it)
    except StopIteration:
        raise InstanceError(f"input ended while reading {what}") from None


def _count(it: Iterator[int], what: str) -> int:
    value = _take(it, what)
    if value < 0:
        raise InstanceError(f"{what} must be non-negative, got {value}")
    return value


def parse_instance(text: str, *, max_cities: int | None = None, max_highways: int | None = None) -> Instance:
    """Parse ``n_cities``, the port pairs and the highway triples from ``text``."""
    it = _tokens(text)
    n_cities = _count(it, "number of cities")
    n_ports = _count(it, "number of ports")
    ports = [(_take(it, "port city"), _take(it, "port cost")) for _ in range(n_ports)]
    n_highways = _count(it, "number of highways")
    max_highways = resolve_limit(max_highways, "CITYPLAN_MAX_HIGHWAYS", MAX_HIGHWAYS)
    if n_highways > max_highways:
        raise InstanceError(f"{n_highways} highways exceed the limit of {max_highways}")
    highways = [
        (_take(it, "highway city"), _take(it, "highway city"), _take(it, "highway cost"))
        for _ in range(n_highways)
    ]
    extra = next(it, None)
    if extra is not None:
        raise InstanceError(f"unexpected trailing value {extra}")
    return Instance.build(n_cities, ports, highways, max_cities=max_cities, max_highways=max_highways)


def read_instance(stream: TextIO, **limits: int | None) -> Instance:
    return parse_instance(stream.read(), **limits)


def format_plan(plan: Plan) -> str:
    summary = plan.summary()
    if summary is None:
        return IMPOSSIBLE + "\n"
    total_cost, ports_count, highways_used = summary
    return f"{total_cost}\n{ports_count} {highways_used}\n"


def write_plan(plan: Plan, stream: TextIO) -> None:
    stream.write(format_plan(plan))


def describe_instance(instance: Instance) -> str:
    """Debug listing: one line per city, then one line per highway."""
    degree = np.bincount(
        np.concatenate([instance.city_a, instance.city_b]), minlength=instance.n_cities
    )
    lines = [
        f"City {i + 1}: port_cost {int(instance.port_costs[i])} | n_highways {int(degree[i])}"
        for i in range(instance.n_cities)
    ]
    for k in range(instance.n_highways):
        a, b, cost = instance.highway(k)
        lines.append(f"Highway {k}: c1 {a} | c2 {b} | cost {cost}")
    return "\n".join(lines) + ("\n" if lines else "")


__all__ = ["IMPOSSIBLE", "describe_instance", "format_plan", "parse_instance", "read_instance", "write_plan"]
