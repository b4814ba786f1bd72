"""Projection harvester for restricting which fields are rendered.

A projection narrows the output of another harvester per type, typically to
keep unit-test assertions focused on the fields under test:

    >>> registry = create_standard_registry()
    >>> registry.projection_harvester().exclude(User, "password", "last_login")

Rules apply to the configured type and its subclasses; the most specific rule
along the MRO wins.
"""

import logging
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional, Tuple

from typing_extensions import Self

from stateprinter.base.harvester import BaseFieldHarvester, HarvestedField

if TYPE_CHECKING:
    from stateprinter.base.registry import HandlerRegistry

logger = logging.getLogger(__name__)

FieldFilter = Callable[[HarvestedField], bool]


class StatePrinterError(Exception):
    """Base exception for stateprinter errors."""

    pass


class ProjectionError(StatePrinterError):
    """Raised when a projection is misconfigured or cannot be applied."""

    pass


class ProjectionHarvester(BaseFieldHarvester):
    """Harvester applying include/exclude/filter rules on top of a peer harvester.

    The fields themselves are obtained from the first other harvester in the
    registry that accepts the type; this harvester only selects among them.

    Examples:
        >>> projection = ProjectionHarvester(registry)
        >>> registry.add(projection)
        >>> projection.include(Order, "id", "total")
        >>> projection.add_filter(Customer, lambda f: f.value is not None)
    """

    def __init__(self, registry: Optional["HandlerRegistry"] = None):
        """Initialize the projection.

        Args:
            registry: Registry whose harvesters provide the unfiltered fields
        """
        self._registry = registry
        self._excluders: Dict[type, Tuple[str, ...]] = {}
        self._includers: Dict[type, Tuple[str, ...]] = {}
        self._filters: Dict[type, FieldFilter] = {}

    def exclude(self, tp: type, *names: str) -> Self:
        """Leave out the named fields of a type.

        Args:
            tp: Type to configure
            *names: Field names to leave out

        Returns:
            Self for method chaining

        Raises:
            ProjectionError: If the type already has an include or filter rule
        """
        self._check_unconfigured(tp, self._excluders)
        self._excluders[tp] = self._excluders.get(tp, ()) + names
        return self

    def include(self, tp: type, *names: str) -> Self:
        """Render only the named fields of a type.

        Args:
            tp: Type to configure
            *names: Field names to keep, in harvested order

        Returns:
            Self for method chaining

        Raises:
            ProjectionError: If the type already has an exclude or filter rule
        """
        self._check_unconfigured(tp, self._includers)
        self._includers[tp] = self._includers.get(tp, ()) + names
        return self

    def add_filter(self, tp: type, predicate: FieldFilter) -> Self:
        """Render only the fields of a type accepted by a predicate.

        Args:
            tp: Type to configure
            predicate: Called with each HarvestedField, True keeps the field

        Returns:
            Self for method chaining

        Raises:
            ProjectionError: If the type already has a rule
        """
        self._check_unconfigured(tp, {})
        self._filters[tp] = predicate
        return self

    def _check_unconfigured(self, tp: type, allowed: Dict[type, Any]) -> None:
        for kind, rules in (
            ("exclude", self._excluders),
            ("include", self._includers),
            ("filter", self._filters),
        ):
            if rules is not allowed and tp in rules:
                raise ProjectionError(
                    f"Type {tp.__name__} already has a projection {kind} rule. "
                    f"Only one kind of rule can be configured per type."
                )

    def _find_rule(self, tp: type) -> Optional[FieldFilter]:
        for klass in tp.__mro__:
            if klass in self._excluders:
                excluded = set(self._excluders[klass])
                return lambda field: field.name not in excluded
            if klass in self._includers:
                included = set(self._includers[klass])
                return lambda field: field.name in included
            if klass in self._filters:
                return self._filters[klass]
        return None

    def can_handle_type(self, tp: type) -> bool:
        return isinstance(tp, type) and self._find_rule(tp) is not None

    def harvest(self, instance: Any) -> List[HarvestedField]:
        tp = type(instance)
        rule = self._find_rule(tp)
        if rule is None:
            raise ProjectionError(f"No projection configured for {tp.__name__}")

        peer = self._find_peer(tp)
        logger.debug(f"Projecting {tp.__name__} fields harvested by {peer!r}")
        return [field for field in peer.harvest(instance) if rule(field)]

    def _find_peer(self, tp: type) -> BaseFieldHarvester:
        if self._registry is None:
            raise ProjectionError(
                "ProjectionHarvester is not bound to a registry; "
                "create it with ProjectionHarvester(registry)"
            )
        for harvester in self._registry.field_harvesters:
            if harvester is not self and harvester.can_handle_type(tp):
                return harvester
        raise ProjectionError(
            f"No field harvester besides the projection handles {tp.__name__}"
        )

    def copy_for(self, registry: "HandlerRegistry") -> "ProjectionHarvester":
        """Create a copy of this projection's rules bound to another registry.

        Args:
            registry: Registry the copy looks up peer harvesters in

        Returns:
            New ProjectionHarvester sharing no rule storage with this one
        """
        projection = ProjectionHarvester(registry)
        projection._excluders = dict(self._excluders)
        projection._includers = dict(self._includers)
        projection._filters = dict(self._filters)
        return projection

    def __repr__(self) -> str:
        configured = len(self._excluders) + len(self._includers) + len(self._filters)
        return f"ProjectionHarvester(configured_types={configured})"
