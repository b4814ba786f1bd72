"""Display formatting for HandlerRegistry describe() output.

This module renders a human-readable overview of a registry: its settings and
the value converters and field harvesters in resolution order.
"""

from io import StringIO
from typing import TYPE_CHECKING, Optional, Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

if TYPE_CHECKING:
    from stateprinter.base.registry import HandlerRegistry


class RegistryDisplayFormatter:
    """Formatter for generating human-readable registry descriptions."""

    def __init__(self, registry: "HandlerRegistry"):
        """Initialize RegistryDisplayFormatter.

        Args:
            registry: HandlerRegistry instance to format
        """
        self._registry = registry

    def describe(
        self, return_string: bool = False, width: int = 100
    ) -> Optional[str]:
        """Generate a description of the registry.

        Args:
            return_string: If True, return the description as a string instead of printing
            width: Console width used for the tables

        Returns:
            None if return_string=False (prints to stdout), otherwise the description string

        Examples:
            >>> create_standard_registry().describe()
            HandlerRegistry
            ===============
            Indent: '    '  Culture: en_US  Style: curly
            Value converters (3):
            ┏━━━┳━━━━━━━━━━━━━━━━━━━━━━━━━━┓
            ┃ # ┃ Converter                ┃
            ...
        """
        if return_string:
            console = Console(file=StringIO(), width=width, color_system=None)
        else:
            console = Console(width=width)

        registry = self._registry
        console.print("HandlerRegistry", markup=False)
        console.print("=" * len("HandlerRegistry"), markup=False)
        console.print(
            f"Indent: {registry.indent_increment!r}  "
            f"Culture: {registry.culture}  "
            f"Style: {registry.output_formatter.style_name}",
            markup=False,
        )
        for title, column, handlers in (
            ("Value converters", "Converter", registry.value_converters),
            ("Field harvesters", "Harvester", registry.field_harvesters),
        ):
            # Heading outside the table: table titles wrap to table width
            console.print(f"{title} ({len(handlers)}):", markup=False)
            console.print(self._handler_table(column, handlers))

        if return_string:
            return console.file.getvalue()
        return None

    @staticmethod
    def _handler_table(column: str, handlers: Sequence[object]) -> Table:
        # Position 0 is tried first
        table = Table()
        table.add_column("#", justify="right")
        table.add_column(column)
        if not handlers:
            table.add_row("", "(none)")
        for position, handler in enumerate(handlers):
            table.add_row(str(position), Text(repr(handler)))
        return table
