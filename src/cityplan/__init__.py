"""CityPlan: cheapest highways and ports connecting every city."""

from __future__ import annotations

from importlib import import_module
from typing import Any

__all__ = ["Instance", "InstanceError", "Plan", "UnionFind", "plan_city", "plan_many"]

_LOCATIONS = {
    "Instance": "cityplan.instance",
    "InstanceError": "cityplan.instance",
    "Plan": "cityplan.core",
    "UnionFind": "cityplan.union_find",
    "plan_city": "cityplan.core",
    "plan_many": "cityplan.core",
}


def __getattr__(name: str) -> Any:  # pragma: no cover - simple lazy import shim
    if name in _LOCATIONS:
        module = import_module(_LOCATIONS[name])
        return getattr(module, name)
    raise AttributeError(f"module 'cityplan' has no attribute {name!r}")


def __dir__() -> list[str]:  # pragma: no cover - cosmetic helper
    return sorted(__all__)
