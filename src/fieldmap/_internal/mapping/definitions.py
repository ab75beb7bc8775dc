from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from ..common import VarTuple
from ..model_tools.definitions import Property
from ..type_tools import TypeDescriptor
from ..utils import Omittable, Omitted, resolve_omittable


class MappingDirection(Enum):
    A_TO_B = "a_to_b"
    B_TO_A = "b_to_a"
    BIDIRECTIONAL = "bidirectional"

    def flip(self) -> "MappingDirection":
        if self == MappingDirection.A_TO_B:
            return MappingDirection.B_TO_A
        if self == MappingDirection.B_TO_A:
            return MappingDirection.A_TO_B
        return self

    def __repr__(self):
        return f"{type(self).__name__}.{self.name}"


def _validate_null_policy(name: str, value: Omittable[bool]) -> None:
    if value is not Omitted() and not isinstance(value, bool):
        raise TypeError(f"{name} must be bool or Omitted(), got {value!r}")


@dataclass(frozen=True)
class FieldMapping:
    """Description of how a property of type A is mapped to a property of type B.

    :param a_property: Property of A side
    :param b_property: Property of B side
    :param a_inverse: Property of the A side value (or of its elements for containers)
        that refers back to the owner, it is kept in sync when nested objects are linked
    :param b_inverse: The same as ``a_inverse`` for B side
    :param direction: Runtime directions where this mapping is used
    :param excluded: Mapping is registered but must be skipped when mapping
    :param converter_id: Identifier of a converter applied instead of default coercion
    :param by_default: Mapping was produced by property name matching,
        explicit mappings take precedence over it
    :param source_mapped_on_null: Whether null B value is written to A property
        when mapping in reverse. ``Omitted()`` defers to the class mapping default
    :param destination_mapped_on_null: Whether null A value is written to B property
        when mapping forward. ``Omitted()`` defers to the class mapping default
    """
    a_property: Property
    b_property: Property
    a_inverse: Optional[Property] = None
    b_inverse: Optional[Property] = None
    direction: MappingDirection = MappingDirection.BIDIRECTIONAL
    excluded: bool = False
    converter_id: Optional[str] = None
    by_default: bool = False
    source_mapped_on_null: Omittable[bool] = Omitted()
    destination_mapped_on_null: Omittable[bool] = Omitted()

    def _validate(self):
        if self.a_property is None or self.b_property is None:
            raise ValueError("Both a_property and b_property must be set")
        if not isinstance(self.direction, MappingDirection):
            raise TypeError(f"direction must be MappingDirection, got {self.direction!r}")
        _validate_null_policy("source_mapped_on_null", self.source_mapped_on_null)
        _validate_null_policy("destination_mapped_on_null", self.destination_mapped_on_null)

    def __post_init__(self):
        self._validate()

    def flip(self) -> "FieldMapping":
        """Returns the same mapping viewed from B side"""
        return replace(
            self,
            a_property=self.b_property,
            b_property=self.a_property,
            a_inverse=self.b_inverse,
            b_inverse=self.a_inverse,
            direction=self.direction.flip(),
            source_mapped_on_null=self.destination_mapped_on_null,
            destination_mapped_on_null=self.source_mapped_on_null,
        )

    def is_applicable(self, direction: MappingDirection) -> bool:
        if direction == MappingDirection.BIDIRECTIONAL:
            raise ValueError("Runtime direction must be A_TO_B or B_TO_A")
        if self.excluded:
            return False
        return self.direction in (MappingDirection.BIDIRECTIONAL, direction)

    def resolve_source_mapped_on_null(self, default: bool) -> bool:
        return resolve_omittable(self.source_mapped_on_null, default)

    def resolve_destination_mapped_on_null(self, default: bool) -> bool:
        return resolve_omittable(self.destination_mapped_on_null, default)


@dataclass(frozen=True)
class ClassMapping:
    a_type: TypeDescriptor
    b_type: TypeDescriptor
    field_mappings: VarTuple[FieldMapping]
    map_nulls: Omittable[bool] = Omitted()
    map_nulls_in_reverse: Omittable[bool] = Omitted()

    def get_applicable(self, direction: MappingDirection) -> VarTuple[FieldMapping]:
        return tuple(
            field_mapping
            for field_mapping in self.field_mappings
            if field_mapping.is_applicable(direction)
        )
