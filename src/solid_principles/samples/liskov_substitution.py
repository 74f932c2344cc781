"""Liskov substitution: every implementer of a contract must honour it.

A single `Bird` contract with `fly()` would force `Ostrich` to raise from
`fly()`, breaking any caller that trusted the contract. Splitting flying and
walking into separate contracts means each bird only implements what it can
actually do, and any `FlyingBird` can be substituted for any other.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from solid_principles.registry import OperationSignature, consume, define_contract, implements

logger = logging.getLogger(__name__)

FLYING_BIRD = define_contract(
    "FlyingBird",
    [OperationSignature("fly", returns="str")],
)

WALKING_BIRD = define_contract(
    "WalkingBird",
    [OperationSignature("walk", returns="str")],
)


@implements(FLYING_BIRD)
class Sparrow:
    def fly(self) -> str:
        logger.info("Sparrow flying")
        return "Sparrow flying"


@implements(WALKING_BIRD)
class Ostrich:
    def walk(self) -> str:
        logger.info("Ostrich walking")
        return "Ostrich walking"


def let_fly(birds: Iterable[Any]) -> list[str]:
    return consume(FLYING_BIRD, birds)


def let_walk(birds: Iterable[Any]) -> list[str]:
    return consume(WALKING_BIRD, birds)


def run() -> list[str]:
    return let_fly([Sparrow()]) + let_walk([Ostrich()])
