"""Errors raised by the capability registry."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from solid_principles.registry.contract import Contract


class CapabilityError(Exception):
    """Base class for capability registry errors."""


class MissingCapability(CapabilityError):
    """Raised when a variant does not provide every operation of a contract.

    This is a programming error: fix the variant (or pick a narrower contract)
    rather than handling it at runtime.
    """

    def __init__(self, contract: str, missing: tuple[str, ...], variant: str = "") -> None:
        super().__init__(contract, missing, variant)
        self.contract = contract
        self.missing = tuple(missing)
        self.variant = variant

    def __str__(self) -> str:
        subject = self.variant or "variant"
        ops = ", ".join(self.missing)
        return f"{subject} does not implement contract {self.contract!r}: missing {ops}"


class ContractAlreadyDefined(CapabilityError):
    """Raised when a contract name is re-used with different operations."""

    def __init__(self, existing: Contract) -> None:
        super().__init__(existing)
        self.existing = existing

    def __str__(self) -> str:
        return f"Contract already defined with different operations: {self.existing.name!r}"


class UnknownContract(CapabilityError, KeyError):
    """Raised when a contract is looked up by a name that was never defined."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown contract: {self.name!r}"
