"""Capability contracts.

A contract is the minimal, named set of operations a consumer depends on.
Variants satisfy a contract structurally: by providing a callable attribute
for each declared operation. Nothing here ever looks at a variant's concrete
type.
"""

from __future__ import annotations

import inspect
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class OperationSignature:
    """A single operation of a contract.

    Attributes:
        name: Attribute name the operation is dispatched through.
        parameters: Names of the positional parameters the operation accepts.
        returns: Optional human-readable description of the result type.
    """

    name: str
    parameters: tuple[str, ...] = ()
    returns: str | None = None

    def __post_init__(self) -> None:
        if not self.name.isidentifier():
            raise ValueError(f"Operation name must be an identifier: {self.name!r}")
        if not isinstance(self.parameters, tuple):
            object.__setattr__(self, "parameters", tuple(self.parameters))
        for param in self.parameters:
            if not param.isidentifier():
                raise ValueError(f"Parameter name must be an identifier: {param!r}")
        if len(set(self.parameters)) != len(self.parameters):
            raise ValueError(f"Duplicate parameter names in operation {self.name!r}")

    @property
    def arity(self) -> int:
        return len(self.parameters)

    def describe(self) -> str:
        rendered = f"{self.name}({', '.join(self.parameters)})"
        if self.returns:
            rendered += f" -> {self.returns}"
        return rendered


OperationSpec = OperationSignature | str


def _as_signature(op: OperationSpec) -> OperationSignature:
    if isinstance(op, OperationSignature):
        return op
    return OperationSignature(name=op)


@dataclass(frozen=True, slots=True)
class Contract:
    """An immutable, ordered set of operations.

    Operations inherited from extended contracts come first, followed by the
    contract's own operations, each in declaration order.
    """

    name: str
    operations: tuple[OperationSignature, ...]
    extends: tuple[str, ...] = ()
    description: str = field(default="", compare=False)

    @property
    def operation_names(self) -> tuple[str, ...]:
        return tuple(op.name for op in self.operations)

    def operation(self, name: str) -> OperationSignature:
        for op in self.operations:
            if op.name == name:
                return op
        raise ValueError(f"Contract {self.name!r} has no operation {name!r}")

    def includes(self, other: Contract) -> bool:
        """Whether every operation of `other` is also an operation of this contract."""

        own = set(self.operations)
        return all(op in own for op in other.operations)

    def missing_from(self, variant: Any, *, strict: bool = True) -> tuple[str, ...]:
        """Return the operations `variant` fails to provide.

        `variant` may be an instance or a class. With `strict`, an operation
        whose callable cannot accept the declared positional parameters also
        counts as missing.
        """

        missing: list[str] = []
        for op in self.operations:
            if not _provides(variant, op, strict=strict):
                missing.append(op.name)
        return tuple(missing)

    def is_satisfied_by(self, variant: Any, *, strict: bool = True) -> bool:
        return not self.missing_from(variant, strict=strict)


def define_contract(
    name: str,
    operations: Iterable[OperationSpec],
    *,
    extends: Iterable[Contract] = (),
    description: str = "",
) -> Contract:
    """Declare a contract.

    Args:
        name: Contract name, unique within a registry.
        operations: Operation signatures; a bare string declares a
            zero-argument operation.
        extends: Contracts whose operations are inherited.
        description: Free-form description shown by the CLI.

    Returns:
        The new contract.

    Raises:
        ValueError: If the name is empty or an operation is declared twice
            with different signatures.
    """

    if not name.strip():
        raise ValueError("Contract name must not be empty")

    collected: list[OperationSignature] = []
    seen: dict[str, OperationSignature] = {}
    parents = tuple(extends)

    for parent in parents:
        for op in parent.operations:
            if op.name in seen:
                if seen[op.name] != op:
                    raise ValueError(
                        f"Conflicting signatures for operation {op.name!r} in {name!r}"
                    )
                continue
            seen[op.name] = op
            collected.append(op)

    for spec in operations:
        op = _as_signature(spec)
        if op.name in seen:
            raise ValueError(f"Duplicate operation {op.name!r} in contract {name!r}")
        seen[op.name] = op
        collected.append(op)

    return Contract(
        name=name,
        operations=tuple(collected),
        extends=tuple(parent.name for parent in parents),
        description=description,
    )


def _provides(variant: Any, op: OperationSignature, *, strict: bool) -> bool:
    member = getattr(variant, op.name, None)
    if member is None or not callable(member):
        return False
    if getattr(member, "__isabstractmethod__", False):
        return False
    if not strict:
        return True
    return _accepts(variant, op, member)


def _accepts(variant: Any, op: OperationSignature, member: Any) -> bool:
    try:
        sig = inspect.signature(member)
    except (TypeError, ValueError):
        # Builtins without introspectable signatures are taken on trust.
        return True

    args: list[object] = [None] * op.arity

    # Functions looked up on a class are unbound and still expect `self`,
    # including those wrapped by decorators such as `functools.cache`.
    if inspect.isclass(variant):
        static = inspect.getattr_static(variant, op.name, None)
        if not isinstance(static, (staticmethod, classmethod)) and inspect.isfunction(
            inspect.unwrap(static)
        ):
            args.insert(0, None)

    try:
        sig.bind(*args)
    except TypeError:
        return False
    return True
