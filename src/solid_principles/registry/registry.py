"""Capability registry: contract bookkeeping and dispatch."""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any, TypeVar

from solid_principles.registry.contract import Contract, OperationSpec, define_contract
from solid_principles.registry.errors import (
    ContractAlreadyDefined,
    MissingCapability,
    UnknownContract,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

Aggregate = Callable[[list[Any]], Any]


def collected(outcomes: list[Any]) -> list[Any]:
    """Aggregate outcomes into a list, in sequence order."""

    return list(outcomes)


def summed(outcomes: list[Any]) -> float:
    """Aggregate numeric outcomes into a correctly rounded, order-independent sum."""

    return math.fsum(outcomes)


def _variant_label(variant: Any) -> str:
    cls = variant if isinstance(variant, type) else type(variant)
    return cls.__qualname__


class CapabilityRegistry:
    """Holds contracts by name and dispatches operations through them.

    Consumers call `consume` or `invoke` with a contract; they never need to
    know which concrete variant they were given.
    """

    def __init__(self, *, strict_signatures: bool = True) -> None:
        self.strict_signatures = strict_signatures
        self._contracts: dict[str, Contract] = {}
        self._variants: dict[str, list[type]] = {}

    # Contracts

    def define_contract(
        self,
        name: str,
        operations: Iterable[OperationSpec],
        *,
        extends: Iterable[Contract | str] = (),
        description: str = "",
    ) -> Contract:
        """Declare a contract and record it under its name.

        Re-declaring an identical contract returns the existing one.

        Raises:
            ContractAlreadyDefined: If the name is taken by a different contract.
            UnknownContract: If an extended contract is given by an unknown name.
        """

        parents = [self._resolve(parent) for parent in extends]
        contract = define_contract(name, operations, extends=parents, description=description)

        existing = self._contracts.get(name)
        if existing is not None:
            if existing != contract:
                raise ContractAlreadyDefined(existing)
            return existing

        self._contracts[name] = contract
        self._variants.setdefault(name, [])
        logger.debug(
            "Contract defined",
            extra={"contract": name, "operations": list(contract.operation_names)},
        )
        return contract

    def get_contract(self, name: str) -> Contract:
        try:
            return self._contracts[name]
        except KeyError:
            raise UnknownContract(name) from None

    def contracts(self) -> list[Contract]:
        return [self._contracts[name] for name in sorted(self._contracts)]

    def variants_of(self, contract: Contract | str) -> list[type]:
        resolved = self._resolve(contract)
        return list(self._variants.get(resolved.name, []))

    # Variants

    def implement(self, contract: Contract | str, variant: T) -> T:
        """Check that `variant` provides every operation of `contract`.

        Returns:
            The variant, unchanged.

        Raises:
            MissingCapability: If any operation is missing.
        """

        resolved = self._resolve(contract)
        missing = resolved.missing_from(variant, strict=self.strict_signatures)
        if missing:
            raise MissingCapability(
                contract=resolved.name,
                missing=missing,
                variant=_variant_label(variant),
            )
        return variant

    def implements(self, *contracts: Contract | str) -> Callable[[type[T]], type[T]]:
        """Class decorator: check a variant class at definition time and register it."""

        resolved = [self._resolve(contract) for contract in contracts]

        def decorator(cls: type[T]) -> type[T]:
            # Check every contract before registering, so a failure leaves no trace.
            for contract in resolved:
                self.implement(contract, cls)
            for contract in resolved:
                registered = self._variants.setdefault(contract.name, [])
                if cls not in registered:
                    registered.append(cls)
                logger.debug(
                    "Variant registered",
                    extra={"contract": contract.name, "variant": cls.__qualname__},
                )
            return cls

        return decorator

    def verify(self, *, strict: bool | None = None) -> list[MissingCapability]:
        """Re-check every registered variant class against its contracts."""

        use_strict = self.strict_signatures if strict is None else strict
        failures: list[MissingCapability] = []
        for name in sorted(self._variants):
            contract = self._contracts[name]
            for cls in self._variants[name]:
                missing = contract.missing_from(cls, strict=use_strict)
                if missing:
                    failures.append(
                        MissingCapability(
                            contract=name, missing=missing, variant=cls.__qualname__
                        )
                    )
        return failures

    # Dispatch

    def invoke(self, contract: Contract | str, variant: Any, operation: str, *args: Any) -> Any:
        """Dispatch a single declared operation on `variant`."""

        resolved = self._resolve(contract)
        op = resolved.operation(operation)
        if len(args) != op.arity:
            raise ValueError(
                f"Operation {op.describe()} of {resolved.name!r} "
                f"expects {op.arity} argument(s), got {len(args)}"
            )
        self.implement(resolved, variant)
        return getattr(variant, op.name)(*args)

    def consume(
        self,
        contract: Contract | str,
        values: Iterable[Any],
        *,
        arguments: Mapping[str, Sequence[Any]] | None = None,
        aggregate: Aggregate = collected,
    ) -> Any:
        """Invoke the contract's operations on every value and aggregate the outcomes.

        Every value is checked before any operation runs. Per value, the
        operations are called in declaration order; the outcome is the single
        result for a one-operation contract and a tuple of results otherwise.
        Exceptions raised by the operations propagate unchanged.

        Args:
            contract: Contract (or contract name) to dispatch through.
            values: Variants, in the order their outcomes are aggregated.
            arguments: Positional arguments per operation name.
            aggregate: Callable folding the list of outcomes into the result.

        Raises:
            MissingCapability: If a value does not satisfy the contract.
            ValueError: If `arguments` names an undeclared operation or omits
                arguments an operation requires.
        """

        resolved = self._resolve(contract)
        call_args = self._call_arguments(resolved, arguments or {})
        values = list(values)

        for value in values:
            self.implement(resolved, value)

        outcomes: list[Any] = []
        for value in values:
            results = tuple(
                getattr(value, op.name)(*call_args[op.name]) for op in resolved.operations
            )
            outcomes.append(results[0] if len(results) == 1 else results)

        logger.debug(
            "Contract consumed",
            extra={"contract": resolved.name, "values": len(outcomes)},
        )
        return aggregate(outcomes)

    def _call_arguments(
        self, contract: Contract, arguments: Mapping[str, Sequence[Any]]
    ) -> dict[str, tuple[Any, ...]]:
        unknown = sorted(set(arguments) - set(contract.operation_names))
        if unknown:
            raise ValueError(
                f"Arguments given for operations not in {contract.name!r}: {', '.join(unknown)}"
            )

        out: dict[str, tuple[Any, ...]] = {}
        for op in contract.operations:
            args = tuple(arguments.get(op.name, ()))
            if len(args) != op.arity:
                raise ValueError(
                    f"Operation {op.describe()} of {contract.name!r} "
                    f"expects {op.arity} argument(s), got {len(args)}"
                )
            out[op.name] = args
        return out

    def _resolve(self, contract: Contract | str) -> Contract:
        if not isinstance(contract, Contract):
            return self.get_contract(contract)

        # Contracts declared outside the registry are adopted on first use.
        existing = self._contracts.get(contract.name)
        if existing is None:
            self._contracts[contract.name] = contract
            self._variants.setdefault(contract.name, [])
            return contract
        if existing != contract:
            raise ContractAlreadyDefined(existing)
        return existing


default_registry = CapabilityRegistry()
