"""Converter for text values."""

from typing import TYPE_CHECKING, Any

from stateprinter.base.converter import BaseValueConverter

if TYPE_CHECKING:
    from stateprinter.base.registry import HandlerRegistry


class StringConverter(BaseValueConverter):
    """Converter rendering strings between quote characters.

    The string content is not escaped.

    Examples:
        >>> StringConverter().render("abc", registry)
        '"abc"'
        >>> StringConverter("'", "'").render("abc", registry)
        "'abc'"
    """

    def __init__(self, quote_start: str = '"', quote_end: str = '"'):
        self.quote_start = quote_start
        self.quote_end = quote_end

    def can_handle_type(self, tp: type) -> bool:
        return isinstance(tp, type) and issubclass(tp, str)

    def render(self, value: Any, context: "HandlerRegistry") -> str:
        return f"{self.quote_start}{value}{self.quote_end}"

    def __repr__(self) -> str:
        return (
            f"StringConverter(quote_start={self.quote_start!r}, "
            f"quote_end={self.quote_end!r})"
        )
