"""Base interface for value converters.

A value converter renders a value of a specific type directly to text,
instead of the value being decomposed into fields and rendered structurally.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from stateprinter.base.registry import HandlerRegistry


class BaseValueConverter(ABC):
    """Abstract base class for value converters.

    Converters are registered with a HandlerRegistry and selected by the
    runtime type of the value being rendered. The registry only ever calls
    can_handle_type(); render() is called by the rendering collaborator once
    the converter has been resolved.

    Examples:
        Create a custom converter:
        >>> class PathConverter(BaseValueConverter):
        ...     def can_handle_type(self, tp: type) -> bool:
        ...         return issubclass(tp, PurePath)
        ...
        ...     def render(self, value, context) -> str:
        ...         return value.as_posix()
        >>> registry = HandlerRegistry().add(PathConverter())
    """

    @abstractmethod
    def can_handle_type(self, tp: type) -> bool:
        """Check if this converter can render values of the given type.

        Args:
            tp: Runtime type of a value

        Returns:
            True if this converter supports the type
        """
        pass

    @abstractmethod
    def render(self, value: Any, context: "HandlerRegistry") -> str:
        """Render a value to text.

        Args:
            value: Value to render, an instance of a type accepted by can_handle_type()
            context: Registry that resolved this converter (culture, indentation)

        Returns:
            Text representation of the value
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
