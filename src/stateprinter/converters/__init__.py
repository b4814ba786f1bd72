"""Built-in value converters.

Available converters:
- StandardTypesConverter: numbers, dates, times, UUIDs and None
- StringConverter: str values between configurable quotes
- EnumConverter: enum members by name

Examples:
    >>> from stateprinter.base import HandlerRegistry
    >>> from stateprinter.converters import StandardTypesConverter, StringConverter
    >>> registry = HandlerRegistry()
    >>> registry.add(StandardTypesConverter()).add(StringConverter())
"""

from stateprinter.converters.enums import EnumConverter
from stateprinter.converters.standard import STANDARD_TYPES, StandardTypesConverter
from stateprinter.converters.strings import StringConverter

__all__ = [
    "EnumConverter",
    "StandardTypesConverter",
    "StringConverter",
    "STANDARD_TYPES",
]
