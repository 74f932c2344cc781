"""Test configuration and fixtures."""

from pathlib import Path

import pytest

from solid_principles.registry import CapabilityRegistry, Contract, OperationSignature


@pytest.fixture
def registry() -> CapabilityRegistry:
    """Provide an empty registry, isolated from the samples' default registry."""
    return CapabilityRegistry()


@pytest.fixture
def area_contract(registry: CapabilityRegistry) -> Contract:
    """Provide a one-operation `Area` contract."""
    return registry.define_contract("Area", [OperationSignature("area", returns="float")])


@pytest.fixture
def clean_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run in an empty directory with no settings in the environment."""
    for var in ("LOG_LEVEL", "SOLID_LOG_FORMAT", "SOLID_STRICT_SIGNATURES"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path
