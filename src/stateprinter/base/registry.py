"""Handler registry for resolving value converters and field harvesters.

This module provides the configuration object of a printer. The registry
supports:
1. Adding value converters and field harvesters (last added wins)
2. Resolving the converter or harvester for a runtime type
3. Cloning, so a rendering pass is isolated from later configuration changes

Handlers are expected to be added during a setup phase. Value converter
resolutions are cached per type and the cache is not invalidated by add(),
so converters added after the first resolution may be ignored for types that
have already been resolved.
"""

import locale
import logging
from typing import TYPE_CHECKING, Any, Dict, Iterable, Optional, Tuple

from typing_extensions import Self

from stateprinter.base.converter import BaseValueConverter
from stateprinter.base.harvester import BaseFieldHarvester
from stateprinter.formatters import CurlyBraceStyle, OutputFormatter

if TYPE_CHECKING:
    from stateprinter.harvesters.projection import ProjectionHarvester
    from stateprinter.settings import RegistrySettings

logger = logging.getLogger(__name__)

DEFAULT_INDENT = "    "


def get_current_culture() -> str:
    """Get the ambient locale name of the running process.

    Returns:
        Locale name such as 'en_US', or 'C' when no locale is configured
    """
    language, _ = locale.getlocale()
    return language or "C"


class HandlerRegistry:
    """Ordered registry of value converters and field harvesters.

    Handlers are examined in the reverse order of adding and the first match
    is returned, so adding a handler overrides existing behaviour only for the
    types it accepts.

    Examples:
        Configure and resolve:
        >>> registry = HandlerRegistry()
        >>> registry.add(StandardTypesConverter()).add(AllFieldsHarvester())
        >>> found, converter = registry.resolve_value_converter(int)
        >>> found
        True

        Isolate a rendering pass:
        >>> snapshot = registry.clone()
        >>> registry.add(StringConverter())  # not visible to snapshot
    """

    def __init__(
        self,
        indent_increment: str = DEFAULT_INDENT,
        field_harvesters: Optional[Iterable[BaseFieldHarvester]] = None,
        value_converters: Optional[Iterable[BaseValueConverter]] = None,
        output_formatter: Optional[OutputFormatter] = None,
        culture: Optional[str] = None,
        warn_on_late_add: bool = True,
    ):
        """Initialize a registry.

        Args:
            indent_increment: Indentation added per nesting level
            field_harvesters: Initial harvesters, most preferred first (copied)
            value_converters: Initial converters, most preferred first (copied)
            output_formatter: Output style (default: CurlyBraceStyle with indent_increment)
            culture: Locale name used when rendering (default: current locale)
            warn_on_late_add: Log a warning when a converter is added after resolution began
        """
        self.indent_increment = indent_increment
        self.output_formatter = (
            output_formatter
            if output_formatter is not None
            else CurlyBraceStyle(indent_increment)
        )
        self.culture = culture if culture is not None else get_current_culture()
        self.warn_on_late_add = warn_on_late_add

        self._value_converters = list(value_converters or [])
        self._field_harvesters = list(field_harvesters or [])
        self._converter_lookup: Dict[type, Optional[BaseValueConverter]] = {}
        self._projection: Optional["ProjectionHarvester"] = None

    @classmethod
    def from_settings(cls, settings: "RegistrySettings") -> "HandlerRegistry":
        """Create an empty registry from settings.

        Args:
            settings: RegistrySettings instance

        Returns:
            New HandlerRegistry
        """
        return cls(
            indent_increment=settings.indent_increment,
            culture=settings.culture,
            warn_on_late_add=settings.warn_on_late_add,
        )

    @property
    def value_converters(self) -> Tuple[BaseValueConverter, ...]:
        """Snapshot of the value converters, most recently added first."""
        return tuple(self._value_converters)

    @property
    def field_harvesters(self) -> Tuple[BaseFieldHarvester, ...]:
        """Snapshot of the field harvesters, most recently added first."""
        return tuple(self._field_harvesters)

    def add(self, handler: Any) -> Self:
        """Add a value converter and/or field harvester.

        Adding overrides the existing behaviour only for types that the added
        handler accepts. A handler implementing both interfaces is added to
        both lists.

        Args:
            handler: BaseValueConverter or BaseFieldHarvester instance

        Returns:
            Self for method chaining

        Raises:
            TypeError: If handler implements neither interface

        Examples:
            >>> registry = HandlerRegistry()
            >>> registry.add(StandardTypesConverter()).add(AllFieldsHarvester())
        """
        is_converter = isinstance(handler, BaseValueConverter)
        is_harvester = isinstance(handler, BaseFieldHarvester)
        if not (is_converter or is_harvester):
            raise TypeError(
                f"Expected a BaseValueConverter or BaseFieldHarvester, "
                f"got {type(handler).__name__}"
            )
        if is_converter:
            self.add_value_converter(handler)
        if is_harvester:
            self.add_field_harvester(handler)
        return self

    def add_value_converter(self, converter: BaseValueConverter) -> Self:
        """Add a value converter in front of all existing converters.

        Args:
            converter: Converter to add

        Returns:
            Self for method chaining
        """
        if self._converter_lookup and self.warn_on_late_add:
            logger.warning(
                f"{converter!r} added after {len(self._converter_lookup)} type(s) "
                f"were resolved; cached resolutions for those types are not updated"
            )
        self._value_converters.insert(0, converter)
        logger.debug(f"Added value converter {converter!r}")
        return self

    def add_field_harvester(self, harvester: BaseFieldHarvester) -> Self:
        """Add a field harvester in front of all existing harvesters.

        Args:
            harvester: Harvester to add

        Returns:
            Self for method chaining
        """
        self._field_harvesters.insert(0, harvester)
        logger.debug(f"Added field harvester {harvester!r}")
        return self

    def resolve_value_converter(
        self, tp: type
    ) -> Tuple[bool, Optional[BaseValueConverter]]:
        """Find the value converter for a type.

        Converters are examined most recently added first. The outcome,
        including a miss, is cached per type.

        Args:
            tp: Runtime type to resolve

        Returns:
            (found, converter) where converter is None when not found

        Examples:
            >>> registry = HandlerRegistry().add(StringConverter())
            >>> registry.resolve_value_converter(str)
            (True, StringConverter(quote_start='"', quote_end='"'))
            >>> registry.resolve_value_converter(list)
            (False, None)
        """
        if tp in self._converter_lookup:
            converter = self._converter_lookup[tp]
        else:
            converter = next(
                (c for c in self._value_converters if c.can_handle_type(tp)), None
            )
            self._converter_lookup[tp] = converter
        return converter is not None, converter

    def resolve_field_harvester(
        self, tp: type
    ) -> Tuple[bool, Optional[BaseFieldHarvester]]:
        """Find the field harvester for a type.

        Harvesters are examined most recently added first. Nothing is cached.

        Args:
            tp: Runtime type to resolve

        Returns:
            (found, harvester) where harvester is None when not found
        """
        harvester = next(
            (h for h in self._field_harvesters if h.can_handle_type(tp)), None
        )
        return harvester is not None, harvester

    def clone(self) -> "HandlerRegistry":
        """Create an independent copy for a rendering pass.

        The copy owns new handler lists and starts with an empty resolution
        cache. Handler instances themselves are shared, except the projection
        harvester, which is copied and bound to the new registry.

        Returns:
            New HandlerRegistry
        """
        clone = HandlerRegistry(
            indent_increment=self.indent_increment,
            field_harvesters=self._field_harvesters,
            value_converters=self._value_converters,
            output_formatter=self.output_formatter,
            culture=self.culture,
            warn_on_late_add=self.warn_on_late_add,
        )
        if self._projection is not None:
            projection = self._projection.copy_for(clone)
            for position, harvester in enumerate(clone._field_harvesters):
                if harvester is self._projection:
                    clone._field_harvesters[position] = projection
            clone._projection = projection
        return clone

    def __copy__(self) -> "HandlerRegistry":
        return self.clone()

    def projection_harvester(self) -> "ProjectionHarvester":
        """Get the projection harvester of this registry.

        Created and added to the field harvesters on first call; later calls
        return the same instance.

        Returns:
            ProjectionHarvester bound to this registry

        Examples:
            >>> registry = create_standard_registry()
            >>> registry.projection_harvester().exclude(User, "password")
        """
        if self._projection is None:
            from stateprinter.harvesters.projection import ProjectionHarvester

            self._projection = ProjectionHarvester(self)
            self.add_field_harvester(self._projection)
        return self._projection

    def describe(self, return_string: bool = False) -> Optional[str]:
        """Generate a human-readable description of the registry.

        Args:
            return_string: If True, return the description instead of printing

        Returns:
            None if return_string=False, otherwise the description string
        """
        from stateprinter.display import RegistryDisplayFormatter

        return RegistryDisplayFormatter(self).describe(return_string=return_string)

    def __repr__(self) -> str:
        return (
            f"HandlerRegistry(value_converters={len(self._value_converters)}, "
            f"field_harvesters={len(self._field_harvesters)}, "
            f"culture={self.culture!r})"
        )


def create_standard_registry(
    settings: Optional["RegistrySettings"] = None,
) -> HandlerRegistry:
    """Create a registry populated with the built-in handlers.

    Args:
        settings: Registry settings (default: global settings, see
            stateprinter.settings.get_global_settings)

    Returns:
        New HandlerRegistry

    Examples:
        >>> registry = create_standard_registry()
        >>> [type(c).__name__ for c in registry.value_converters]
        ['EnumConverter', 'StringConverter', 'StandardTypesConverter']

        >>> registry = create_standard_registry(RegistrySettings(culture="da_DK"))
    """
    from stateprinter.converters import (
        EnumConverter,
        StandardTypesConverter,
        StringConverter,
    )
    from stateprinter.harvesters import AllFieldsHarvester
    from stateprinter.settings import get_global_settings

    registry = HandlerRegistry.from_settings(settings or get_global_settings())

    # Most generic first: later additions take precedence
    registry.add(AllFieldsHarvester())
    registry.add(StandardTypesConverter())
    registry.add(StringConverter())
    registry.add(EnumConverter())
    return registry
