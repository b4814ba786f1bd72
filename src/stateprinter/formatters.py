"""Output style definitions.

An output formatter describes the structural layout of rendered text. The
registry carries it as an opaque value and hands it to the rendering
collaborator unchanged.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


class OutputFormatter(ABC):
    """Abstract base class for output styles."""

    indent_increment: str

    @property
    @abstractmethod
    def style_name(self) -> str:
        """Short identifier of the style (e.g., 'curly')."""
        pass


@dataclass(frozen=True)
class CurlyBraceStyle(OutputFormatter):
    """Nested objects enclosed in curly braces, one field per line.

    Attributes:
        indent_increment: Indentation added per nesting level
        open_token: Token opening a nested object
        close_token: Token closing a nested object

    Examples:
        >>> style = CurlyBraceStyle("  ")
        >>> style.style_name
        'curly'
    """

    indent_increment: str = "    "
    open_token: str = "{"
    close_token: str = "}"

    @property
    def style_name(self) -> str:
        return "curly"
