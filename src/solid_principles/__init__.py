"""SOLID Principles Samples.

Five small samples, one per SOLID principle, built on a capability registry:
contracts declare the operations a consumer needs, variants implement them,
and consumers dispatch through the contract without inspecting concrete types.
"""

__version__ = "0.1.0"

from solid_principles.config import SolidSettings

__all__ = ["__version__", "SolidSettings"]
