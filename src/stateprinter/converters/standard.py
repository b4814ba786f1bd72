"""Converter for built-in scalar types."""

import uuid
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from fractions import Fraction
from typing import TYPE_CHECKING, Any, Optional, Tuple

from stateprinter.base.converter import BaseValueConverter

if TYPE_CHECKING:
    from stateprinter.base.registry import HandlerRegistry

STANDARD_TYPES: Tuple[type, ...] = (
    bool,
    int,
    float,
    complex,
    Decimal,
    Fraction,
    datetime,
    date,
    time,
    timedelta,
    uuid.UUID,
    type(None),
)


class StandardTypesConverter(BaseValueConverter):
    """Converter for numbers, dates, UUIDs and None.

    Values are rendered with str(), except floats which use repr() so that
    the rendered text round-trips to the same value.

    Examples:
        >>> converter = StandardTypesConverter()
        >>> converter.can_handle_type(int)
        True
        >>> converter.render(0.1 + 0.2, registry)
        '0.30000000000000004'
        >>> StandardTypesConverter(handled_types=(int,)).can_handle_type(float)
        False
    """

    def __init__(self, handled_types: Optional[Tuple[type, ...]] = None):
        """Initialize the converter.

        Args:
            handled_types: Types to accept, subclasses included (default: STANDARD_TYPES)
        """
        self.handled_types = (
            STANDARD_TYPES if handled_types is None else tuple(handled_types)
        )

    def can_handle_type(self, tp: type) -> bool:
        return isinstance(tp, type) and issubclass(tp, self.handled_types)

    def render(self, value: Any, context: "HandlerRegistry") -> str:
        if isinstance(value, float):
            return repr(value)
        return str(value)
