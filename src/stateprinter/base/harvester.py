"""Base interface for field harvesters.

A field harvester extracts the fields of an instance so that the rendering
collaborator can print the instance structurally, recursing into each value.
"""

from abc import ABC, abstractmethod
from typing import Any, List, NamedTuple


class HarvestedField(NamedTuple):
    """A single field extracted from an instance."""

    name: str
    value: Any


class BaseFieldHarvester(ABC):
    """Abstract base class for field harvesters.

    Harvesters are registered with a HandlerRegistry and selected by the
    runtime type of the instance being rendered. Fields must be returned in a
    stable order so output is deterministic between runs.

    Examples:
        >>> class PointHarvester(BaseFieldHarvester):
        ...     def can_handle_type(self, tp: type) -> bool:
        ...         return issubclass(tp, Point)
        ...
        ...     def harvest(self, instance):
        ...         return [HarvestedField("x", instance.x), HarvestedField("y", instance.y)]
    """

    @abstractmethod
    def can_handle_type(self, tp: type) -> bool:
        """Check if this harvester can extract fields from instances of a type.

        Args:
            tp: Runtime type of an instance

        Returns:
            True if this harvester supports the type
        """
        pass

    @abstractmethod
    def harvest(self, instance: Any) -> List[HarvestedField]:
        """Extract the fields of an instance.

        Args:
            instance: Object to extract fields from

        Returns:
            Ordered list of (name, value) fields
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
