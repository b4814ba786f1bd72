"""Converter for enum members."""

import enum
from typing import TYPE_CHECKING, Any

from stateprinter.base.converter import BaseValueConverter

if TYPE_CHECKING:
    from stateprinter.base.registry import HandlerRegistry


class EnumConverter(BaseValueConverter):
    """Converter rendering enum members by name.

    Flag combinations that are not a declared member are rendered as the
    names of their single-bit members joined by ', '.

    Examples:
        >>> EnumConverter().render(Color.RED, registry)
        'RED'
        >>> EnumConverter().render(Perm.R | Perm.W, registry)
        'R, W'
    """

    def can_handle_type(self, tp: type) -> bool:
        return isinstance(tp, type) and issubclass(tp, enum.Enum)

    def render(self, value: Any, context: "HandlerRegistry") -> str:
        declared = type(value).__members__
        if not isinstance(value, enum.Flag) or any(
            value.value == member.value for member in declared.values()
        ):
            return value.name

        # Undeclared flag combination: decompose into single bits
        names = [
            name
            for name, member in declared.items()
            if _is_single_bit(member.value)
            and (value.value & member.value) == member.value
        ]
        return ", ".join(names) if names else str(value.value)


def _is_single_bit(number: int) -> bool:
    return number > 0 and (number & (number - 1)) == 0
