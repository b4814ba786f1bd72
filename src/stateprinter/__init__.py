"""stateprinter: Handler resolution core for rendering object state as text."""

__version__ = "0.1.0"

from stateprinter.base import (
    BaseFieldHarvester,
    BaseValueConverter,
    HandlerRegistry,
    HarvestedField,
    create_standard_registry,
)
from stateprinter.settings import RegistrySettings

__all__ = [
    "BaseFieldHarvester",
    "BaseValueConverter",
    "HandlerRegistry",
    "HarvestedField",
    "RegistrySettings",
    "create_standard_registry",
    "__version__",
]
