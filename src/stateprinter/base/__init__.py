"""Base classes for the stateprinter handler system.

This module provides the foundation for handler resolution:
- BaseValueConverter: Abstract base class for converters rendering values directly
- BaseFieldHarvester: Abstract base class for harvesters extracting fields
- HandlerRegistry: Ordered, cloneable registry resolving handlers by type
- create_standard_registry: Registry pre-populated with the built-in handlers
"""

from stateprinter.base.converter import BaseValueConverter
from stateprinter.base.harvester import BaseFieldHarvester, HarvestedField
from stateprinter.base.registry import (
    DEFAULT_INDENT,
    HandlerRegistry,
    create_standard_registry,
    get_current_culture,
)

__all__ = [
    "BaseValueConverter",
    "BaseFieldHarvester",
    "HarvestedField",
    "HandlerRegistry",
    "DEFAULT_INDENT",
    "create_standard_registry",
    "get_current_culture",
]
