from abc import ABC, abstractmethod
from typing import Optional, Union

from ..common import TypeHint
from ..errors import BuilderFinalizedError
from ..model_tools.definitions import Property
from ..type_tools import TypeDescriptor
from ..utils import Cloneable, Omittable, Omitted
from .definitions import FieldMapping, MappingDirection


class FieldMappingHost(ABC):
    """Owner of root types and of the registry that field mapping builders write to"""

    @property
    @abstractmethod
    def a_type(self) -> TypeDescriptor:
        ...

    @property
    @abstractmethod
    def b_type(self) -> TypeDescriptor:
        ...

    @abstractmethod
    def resolve_property(self, owner: Union[TypeDescriptor, TypeHint], expression: str) -> Property:
        ...

    @abstractmethod
    def register_field_mapping(self, field_mapping: FieldMapping) -> None:
        ...


class _FinalizationGuard:
    __slots__ = ("is_finalized", )

    def __init__(self):
        self.is_finalized = False


def _to_type_descriptor(tp: Union[TypeDescriptor, TypeHint]) -> TypeDescriptor:
    if isinstance(tp, TypeDescriptor):
        return tp
    if isinstance(tp, type):
        return TypeDescriptor.from_raw(tp)
    return TypeDescriptor.of(tp)


def check_bool(name: str, value: bool) -> None:
    if not isinstance(value, bool):
        raise TypeError(f"{name} must be bool, got {value!r}")


def check_omittable_bool(name: str, value: Omittable[bool]) -> None:
    if value is not Omitted():
        check_bool(name, value)  # type: ignore[arg-type]


class FieldMappingBuilder(Cloneable):
    """Accumulates configuration of a single field mapping.

    Each configuration method returns a new builder leaving the receiver untouched,
    so a failed call never corrupts the configured state.
    All builders derived from one another share the same lifecycle:
    after any of them is added to the host, every other one is finalized too.
    """

    def __init__(
        self,
        host: FieldMappingHost,
        a_property: Property,
        b_property: Property,
        *,
        by_default: bool = False,
        source_mapped_on_null: Omittable[bool] = Omitted(),
        destination_mapped_on_null: Omittable[bool] = Omitted(),
    ):
        self._host = host
        self._a_property = a_property
        self._b_property = b_property
        self._a_inverse: Optional[Property] = None
        self._b_inverse: Optional[Property] = None
        self._direction = MappingDirection.BIDIRECTIONAL
        self._excluded = False
        self._converter_id: Optional[str] = None
        self._by_default = by_default
        self._source_mapped_on_null = source_mapped_on_null
        self._destination_mapped_on_null = destination_mapped_on_null
        self._guard = _FinalizationGuard()

    @classmethod
    def from_expressions(
        cls,
        host: FieldMappingHost,
        a: str,
        b: str,
        *,
        a_type: Union[TypeDescriptor, TypeHint, None] = None,
        b_type: Union[TypeDescriptor, TypeHint, None] = None,
        by_default: bool = False,
        source_mapped_on_null: Omittable[bool] = Omitted(),
        destination_mapped_on_null: Omittable[bool] = Omitted(),
    ) -> "FieldMappingBuilder":
        """Resolves both expressions against the host root types
        or against the types passed explicitly
        """
        return cls(
            host,
            host.resolve_property(host.a_type if a_type is None else a_type, a),
            host.resolve_property(host.b_type if b_type is None else b_type, b),
            by_default=by_default,
            source_mapped_on_null=source_mapped_on_null,
            destination_mapped_on_null=destination_mapped_on_null,
        )

    @property
    def a_property(self) -> Property:
        return self._a_property

    @property
    def b_property(self) -> Property:
        return self._b_property

    @property
    def a_inverse_property(self) -> Optional[Property]:
        return self._a_inverse

    @property
    def b_inverse_property(self) -> Optional[Property]:
        return self._b_inverse

    @property
    def mapping_direction(self) -> MappingDirection:
        return self._direction

    @property
    def is_finalized(self) -> bool:
        return self._guard.is_finalized

    def _ensure_configurable(self) -> None:
        if self._guard.is_finalized:
            raise BuilderFinalizedError(self._a_property.expression, self._b_property.expression)

    def a_inverse(self, expression: str) -> "FieldMappingBuilder":
        """Sets property of A side value that refers back to the A side owner.
        For containers it is looked up at the element type
        """
        self._ensure_configurable()
        inverse = self._host.resolve_property(self._a_property.inverse_owner_type, expression)
        with self._clone() as clone:
            clone._a_inverse = inverse
        return clone

    def b_inverse(self, expression: str) -> "FieldMappingBuilder":
        """Sets property of B side value that refers back to the B side owner.
        For containers it is looked up at the element type
        """
        self._ensure_configurable()
        inverse = self._host.resolve_property(self._b_property.inverse_owner_type, expression)
        with self._clone() as clone:
            clone._b_inverse = inverse
        return clone

    def map_nulls_in_reverse(self, source_mapped_on_null: bool) -> "FieldMappingBuilder":
        """Whether A property is set to None when mapping B to A and B value is None"""
        self._ensure_configurable()
        check_bool("source_mapped_on_null", source_mapped_on_null)
        with self._clone() as clone:
            clone._source_mapped_on_null = source_mapped_on_null
        return clone

    def map_nulls(self, destination_mapped_on_null: bool) -> "FieldMappingBuilder":
        """Whether B property is set to None when mapping A to B and A value is None"""
        self._ensure_configurable()
        check_bool("destination_mapped_on_null", destination_mapped_on_null)
        with self._clone() as clone:
            clone._destination_mapped_on_null = destination_mapped_on_null
        return clone

    def a_to_b(self) -> "FieldMappingBuilder":
        return self.direction(MappingDirection.A_TO_B)

    def b_to_a(self) -> "FieldMappingBuilder":
        return self.direction(MappingDirection.B_TO_A)

    def direction(self, direction: MappingDirection) -> "FieldMappingBuilder":
        self._ensure_configurable()
        if not isinstance(direction, MappingDirection):
            raise TypeError(f"direction must be MappingDirection, got {direction!r}")
        with self._clone() as clone:
            clone._direction = direction
        return clone

    def converter(self, converter_id: str) -> "FieldMappingBuilder":
        """Applies converter registered under the id.
        The id is checked when mapping is executed, not here
        """
        self._ensure_configurable()
        with self._clone() as clone:
            clone._converter_id = converter_id
        return clone

    def exclude(self) -> "FieldMappingBuilder":
        self._ensure_configurable()
        with self._clone() as clone:
            clone._excluded = True
        return clone

    def a_element_type(self, element_type: Union[TypeDescriptor, TypeHint]) -> "FieldMappingBuilder":
        """Sets element type of A side container that has no type parameters"""
        self._ensure_configurable()
        a_property = self._a_property.with_element_type(_to_type_descriptor(element_type))
        with self._clone() as clone:
            clone._a_property = a_property
        return clone

    def b_element_type(self, element_type: Union[TypeDescriptor, TypeHint]) -> "FieldMappingBuilder":
        """Sets element type of B side container that has no type parameters"""
        self._ensure_configurable()
        b_property = self._b_property.with_element_type(_to_type_descriptor(element_type))
        with self._clone() as clone:
            clone._b_property = b_property
        return clone

    def _to_field_mapping(self) -> FieldMapping:
        return FieldMapping(
            a_property=self._a_property,
            b_property=self._b_property,
            a_inverse=self._a_inverse,
            b_inverse=self._b_inverse,
            direction=self._direction,
            excluded=self._excluded,
            converter_id=self._converter_id,
            by_default=self._by_default,
            source_mapped_on_null=self._source_mapped_on_null,
            destination_mapped_on_null=self._destination_mapped_on_null,
        )

    def add(self) -> FieldMappingHost:
        """Registers the configured field mapping at the host and returns the host.
        The builder can not be used after that
        """
        self._ensure_configurable()
        self._host.register_field_mapping(self._to_field_mapping())
        self._guard.is_finalized = True
        return self._host

    def __repr__(self):
        return (
            f"{type(self).__name__}"
            f"(a={self._a_property.expression!r}, b={self._b_property.expression!r},"
            f" direction={self._direction!r}, is_finalized={self.is_finalized})"
        )
