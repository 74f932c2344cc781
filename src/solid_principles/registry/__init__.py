"""Capability registry package.

Module-level helpers operate on `default_registry`, which the bundled samples
use. Tests and embedding applications can create their own
`CapabilityRegistry`.
"""

from solid_principles.registry.contract import Contract, OperationSignature
from solid_principles.registry.errors import (
    CapabilityError,
    ContractAlreadyDefined,
    MissingCapability,
    UnknownContract,
)
from solid_principles.registry.registry import (
    CapabilityRegistry,
    collected,
    default_registry,
    summed,
)

define_contract = default_registry.define_contract
implement = default_registry.implement
implements = default_registry.implements
consume = default_registry.consume
invoke = default_registry.invoke

__all__ = [
    "CapabilityError",
    "CapabilityRegistry",
    "Contract",
    "ContractAlreadyDefined",
    "MissingCapability",
    "OperationSignature",
    "UnknownContract",
    "collected",
    "consume",
    "default_registry",
    "define_contract",
    "implement",
    "implements",
    "invoke",
    "summed",
]
