"""Built-in field harvesters.

Available harvesters:
- AllFieldsHarvester: every stored attribute (dataclass fields, slots, __dict__)
- PublicFieldsHarvester: public attributes and public properties
- ProjectionHarvester: include/exclude/filter rules over another harvester

Examples:
    >>> from stateprinter.base import HandlerRegistry
    >>> from stateprinter.harvesters import AllFieldsHarvester
    >>> registry = HandlerRegistry().add(AllFieldsHarvester())
    >>> registry.projection_harvester().exclude(User, "password")
"""

from stateprinter.harvesters.fields import (
    AllFieldsHarvester,
    PublicFieldsHarvester,
    iter_instance_fields,
)
from stateprinter.harvesters.projection import (
    ProjectionError,
    ProjectionHarvester,
    StatePrinterError,
)

__all__ = [
    "AllFieldsHarvester",
    "PublicFieldsHarvester",
    "ProjectionHarvester",
    "ProjectionError",
    "StatePrinterError",
    "iter_instance_fields",
]
