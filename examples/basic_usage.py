#!/usr/bin/env python3
"""Programmatic capability registry example.

This demonstrates using the registry directly:

* declare a contract on a private registry
* register variants against it
* consume a mixed list of variants without inspecting their types
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Sequence

from solid_principles.config import SolidSettings
from solid_principles.logging import configure_logging
from solid_principles.registry import CapabilityRegistry, MissingCapability, summed

registry = CapabilityRegistry()

PRICED = registry.define_contract("Priced", ["price"])


@registry.implements(PRICED)
@dataclass(frozen=True)
class Book:
    title: str
    cost: float

    def price(self) -> float:
        return self.cost


@registry.implements(PRICED)
@dataclass(frozen=True)
class Subscription:
    months: int
    monthly: float

    def price(self) -> float:
        return self.months * self.monthly


@dataclass(frozen=True)
class Gift:
    note: str


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Total a basket through the Priced contract.")
    parser.add_argument("--months", type=int, default=3, help="Subscription length in months")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)

    settings = SolidSettings()
    configure_logging(settings.log_level, settings.log_format)

    basket = [Book(title="Clean Architecture", cost=32.5), Subscription(args.months, 4.99)]
    print(f"Basket total: {registry.consume(PRICED, basket, aggregate=summed):.2f}")

    try:
        registry.implement(PRICED, Gift(note="free"))
    except MissingCapability as exc:
        print(str(exc))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
