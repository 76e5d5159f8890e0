"""Command line driver: read an instance, print its plan."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from .core import plan_city
from .instance import InstanceError
from .io import describe_instance, read_instance, write_plan
from .mst import DEFAULT_STRATEGY, STRATEGIES


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="cityplan", description="Minimum-cost highway and port plan.")
    parser.add_argument("input", nargs="?", type=argparse.FileType("r"), default=sys.stdin)
    parser.add_argument("-s", "--strategy", choices=sorted(STRATEGIES), default=DEFAULT_STRATEGY)
    parser.add_argument("-v", "--verbose", action="store_true")
    parser.add_argument("--dump", action="store_true", help="print the parsed instance before planning")
    args = parser.parse_args(argv)

    try:
        instance = read_instance(args.input)
    except InstanceError as exc:
        print(f"cityplan: invalid instance: {exc}", file=sys.stderr)
        return 2
    finally:
        if args.input is not sys.stdin:
            args.input.close()

    if args.dump:
        sys.stdout.write(describe_instance(instance))
    plan = plan_city(instance, strategy=args.strategy, verbose=args.verbose)
    write_plan(plan, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
