"""Open-closed: extend by adding variants, never by editing the consumer.

`calculate_area` only knows the `Shape` contract. A new shape (a triangle,
say) implements `area()` and works with `calculate_area` unchanged.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any

from solid_principles.registry import (
    OperationSignature,
    consume,
    define_contract,
    implements,
    summed,
)

logger = logging.getLogger(__name__)

SHAPE = define_contract(
    "Shape",
    [OperationSignature("area", returns="float")],
    description="Anything with an area",
)


def _finite_non_negative(**dimensions: float) -> None:
    for label, value in dimensions.items():
        if not math.isfinite(value) or value < 0:
            raise ValueError(f"{label} must be a finite non-negative number, got {value}")


@implements(SHAPE)
@dataclass(frozen=True, slots=True)
class Rectangle:
    width: float
    height: float

    def __post_init__(self) -> None:
        _finite_non_negative(width=self.width, height=self.height)

    def area(self) -> float:
        return self.width * self.height


@implements(SHAPE)
@dataclass(frozen=True, slots=True)
class Circle:
    radius: float

    def __post_init__(self) -> None:
        _finite_non_negative(radius=self.radius)

    def area(self) -> float:
        return math.pi * self.radius * self.radius


def calculate_area(*shapes: Any) -> float:
    """Total area of `shapes`, whatever their concrete types."""

    total: float = consume(SHAPE, shapes, aggregate=summed)
    logger.debug("Area calculated", extra={"shapes": len(shapes), "total": total})
    return total


def run() -> list[str]:
    shapes = [Rectangle(width=3, height=4), Circle(radius=2)]
    total = calculate_area(*shapes)
    return [f"{shape!r}: {shape.area():.3f}" for shape in shapes] + [
        f"Total area via {SHAPE.name}: {total:.3f}"
    ]
