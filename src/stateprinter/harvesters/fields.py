"""Harvesters extracting the attributes of plain Python objects."""

import dataclasses
from typing import Any, Iterator, List, Tuple

from stateprinter.base.harvester import BaseFieldHarvester, HarvestedField


def iter_instance_fields(instance: Any) -> Iterator[Tuple[str, Any]]:
    """Iterate over the stored attributes of an instance.

    Order: dataclass fields in declaration order, then __slots__ along the
    MRO (base classes first), then remaining __dict__ entries in insertion
    order. Each name is produced once; unset slots and unassigned dataclass
    fields are skipped.

    Args:
        instance: Object to inspect

    Yields:
        (name, value) pairs
    """
    seen = set()
    tp = type(instance)

    if dataclasses.is_dataclass(tp):
        for field in dataclasses.fields(tp):
            seen.add(field.name)
            try:
                value = getattr(instance, field.name)
            except AttributeError:
                # init=False field never assigned
                continue
            yield field.name, value

    for klass in reversed(tp.__mro__):
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name in seen or name in ("__dict__", "__weakref__"):
                continue
            try:
                value = getattr(instance, name)
            except AttributeError:
                # Slot declared but never assigned
                continue
            seen.add(name)
            yield name, value

    for name, value in getattr(instance, "__dict__", {}).items():
        if name not in seen:
            seen.add(name)
            yield name, value


class AllFieldsHarvester(BaseFieldHarvester):
    """Harvester returning every stored attribute, private ones included.

    Accepts any type, so it is normally added first and acts as the fallback
    for more specific harvesters.

    Examples:
        >>> @dataclass
        ... class Point:
        ...     x: int
        ...     _y: int
        >>> AllFieldsHarvester().harvest(Point(1, 2))
        [HarvestedField(name='x', value=1), HarvestedField(name='_y', value=2)]
    """

    def can_handle_type(self, tp: type) -> bool:
        return True

    def harvest(self, instance: Any) -> List[HarvestedField]:
        return [
            HarvestedField(name, value)
            for name, value in iter_instance_fields(instance)
        ]


class PublicFieldsHarvester(BaseFieldHarvester):
    """Harvester returning public attributes and public properties.

    Names beginning with an underscore are skipped. Properties declared on the
    class (and its bases) are evaluated after the stored attributes, in
    declaration order; exceptions raised by a property getter propagate.
    """

    def __init__(self, include_properties: bool = True):
        self.include_properties = include_properties

    def can_handle_type(self, tp: type) -> bool:
        return True

    def harvest(self, instance: Any) -> List[HarvestedField]:
        fields = [
            HarvestedField(name, value)
            for name, value in iter_instance_fields(instance)
            if not name.startswith("_")
        ]
        if not self.include_properties:
            return fields

        seen = {field.name for field in fields}
        for klass in reversed(type(instance).__mro__):
            for name, attr in vars(klass).items():
                if (
                    isinstance(attr, property)
                    and not name.startswith("_")
                    and name not in seen
                ):
                    seen.add(name)
                    fields.append(HarvestedField(name, getattr(instance, name)))
        return fields

    def __repr__(self) -> str:
        return f"PublicFieldsHarvester(include_properties={self.include_properties})"
