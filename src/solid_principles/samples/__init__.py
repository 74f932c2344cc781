"""Catalogue of the SOLID samples.

Each sample is independent: it declares its own contracts on the default
registry, its own variants and a `run()` demonstration.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from solid_principles.registry import Contract
from solid_principles.samples import (
    dependency_inversion,
    interface_segregation,
    liskov_substitution,
    open_closed,
    single_responsibility,
)


@dataclass(frozen=True, slots=True)
class Sample:
    """A single principle sample."""

    slug: str
    acronym: str
    principle: str
    summary: str
    contracts: tuple[Contract, ...]
    run: Callable[[], list[str]]


SAMPLES: dict[str, Sample] = {
    sample.slug: sample
    for sample in (
        Sample(
            slug="single-responsibility",
            acronym="srp",
            principle="Single Responsibility",
            summary="A class should have only one reason to change.",
            contracts=(
                single_responsibility.USER_STORE,
                single_responsibility.WELCOME_MAILER,
            ),
            run=single_responsibility.run,
        ),
        Sample(
            slug="open-closed",
            acronym="ocp",
            principle="Open-Closed",
            summary="Open for extension, closed for modification.",
            contracts=(open_closed.SHAPE,),
            run=open_closed.run,
        ),
        Sample(
            slug="liskov-substitution",
            acronym="lsp",
            principle="Liskov Substitution",
            summary="Implementers must be substitutable for their contract.",
            contracts=(liskov_substitution.FLYING_BIRD, liskov_substitution.WALKING_BIRD),
            run=liskov_substitution.run,
        ),
        Sample(
            slug="interface-segregation",
            acronym="isp",
            principle="Interface Segregation",
            summary="No client should depend on methods it does not use.",
            contracts=(interface_segregation.WORKER, interface_segregation.LIVING_WORKER),
            run=interface_segregation.run,
        ),
        Sample(
            slug="dependency-inversion",
            acronym="dip",
            principle="Dependency Inversion",
            summary="Depend on abstractions, not on concrete implementations.",
            contracts=(dependency_inversion.DATABASE,),
            run=dependency_inversion.run,
        ),
    )
}


def get_sample(key: str) -> Sample:
    """Look up a sample by slug or acronym (case-insensitive).

    Raises:
        KeyError: If no sample matches.
    """

    wanted = key.strip().lower()
    for sample in SAMPLES.values():
        if wanted in (sample.slug, sample.acronym):
            return sample
    raise KeyError(key)


__all__ = ["SAMPLES", "Sample", "get_sample"]
