"""Interface segregation: no client depends on methods it does not use.

`Worker` only asks for `work()`. `LivingWorker` extends it with `eat()` and
`sleep()`. A `Robot` implements `Worker` and is never asked for empty
`eat`/`sleep` methods; a `Human` implements the whole `LivingWorker`.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from solid_principles.registry import OperationSignature, consume, define_contract, implements

logger = logging.getLogger(__name__)

WORKER = define_contract("Worker", [OperationSignature("work", returns="str")])

LIVING_WORKER = define_contract(
    "LivingWorker",
    [OperationSignature("eat", returns="str"), OperationSignature("sleep", returns="str")],
    extends=[WORKER],
)


@implements(WORKER)
class Robot:
    def work(self) -> str:
        logger.info("Robot working")
        return "Robot working"


@implements(WORKER, LIVING_WORKER)
class Human:
    def work(self) -> str:
        logger.info("Human working")
        return "Human working"

    def eat(self) -> str:
        logger.info("Human eating")
        return "Human eating"

    def sleep(self) -> str:
        logger.info("Human sleeping")
        return "Human sleeping"


def run_shift(workers: Iterable[Any]) -> list[str]:
    """Have every worker work. Accepts robots and humans alike."""

    return consume(WORKER, workers)


def run_day(living_workers: Iterable[Any]) -> list[tuple[str, str, str]]:
    """Work, eat and sleep, in that order, for each living worker."""

    return consume(LIVING_WORKER, living_workers)


def run() -> list[str]:
    lines = run_shift([Robot(), Human()])
    for day in run_day([Human()]):
        lines.append(" -> ".join(day))
    return lines
