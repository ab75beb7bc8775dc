import logging
from typing import Optional, Union

from ..common import TypeHint
from ..model_tools.definitions import Property
from ..type_tools import TypeDescriptor
from ..utils import Omittable, Omitted
from .definitions import ClassMapping, FieldMapping
from .field_builder import FieldMappingBuilder, FieldMappingHost, check_bool, check_omittable_bool
from .path import split_at_root_property, split_into_segments
from .resolver import IntrospectionPropertyResolver, PropertyResolver

logger = logging.getLogger(__name__)


def _root_name(prop: Property) -> str:
    return split_at_root_property(split_into_segments(prop.expression)[0])[0]


class ClassMappingBuilder(FieldMappingHost):
    """Collects field mappings between two root types.

    :param a_type: Type of A side
    :param b_type: Type of B side
    :param resolver: Resolver of property expressions,
        :class:`IntrospectionPropertyResolver` is used by default
    :param map_nulls: Initial ``map_nulls`` policy of created field mappings
    :param map_nulls_in_reverse: Initial ``map_nulls_in_reverse`` policy of created field mappings
    """

    def __init__(
        self,
        a_type: Union[TypeDescriptor, TypeHint],
        b_type: Union[TypeDescriptor, TypeHint],
        *,
        resolver: Optional[PropertyResolver] = None,
        map_nulls: Omittable[bool] = Omitted(),
        map_nulls_in_reverse: Omittable[bool] = Omitted(),
    ):
        check_omittable_bool("map_nulls", map_nulls)
        check_omittable_bool("map_nulls_in_reverse", map_nulls_in_reverse)
        self._a_type = TypeDescriptor.of(a_type)
        self._b_type = TypeDescriptor.of(b_type)
        self._resolver = IntrospectionPropertyResolver() if resolver is None else resolver
        self._map_nulls = map_nulls
        self._map_nulls_in_reverse = map_nulls_in_reverse
        self._field_mappings: list[FieldMapping] = []

    @property
    def a_type(self) -> TypeDescriptor:
        return self._a_type

    @property
    def b_type(self) -> TypeDescriptor:
        return self._b_type

    @property
    def field_mappings(self) -> tuple[FieldMapping, ...]:
        return tuple(self._field_mappings)

    def resolve_property(self, owner: Union[TypeDescriptor, TypeHint], expression: str) -> Property:
        return self._resolver.resolve_property(owner, expression)

    def register_field_mapping(self, field_mapping: FieldMapping) -> None:
        if not field_mapping.by_default:
            self._drop_default_mappings(field_mapping)
        self._field_mappings.append(field_mapping)
        logger.debug(
            "Field mapping %r -> %r is registered for %r -> %r",
            field_mapping.a_property.expression,
            field_mapping.b_property.expression,
            self._a_type.hint,
            self._b_type.hint,
        )

    def _drop_default_mappings(self, field_mapping: FieldMapping) -> None:
        a_expression = field_mapping.a_property.expression
        kept = []
        for registered in self._field_mappings:
            if registered.by_default and registered.a_property.expression == a_expression:
                logger.debug("Default field mapping of %r is replaced by explicit one", a_expression)
            else:
                kept.append(registered)
        self._field_mappings = kept

    def field_map(
        self,
        a: str,
        b: Optional[str] = None,
        *,
        a_type: Union[TypeDescriptor, TypeHint, None] = None,
        b_type: Union[TypeDescriptor, TypeHint, None] = None,
    ) -> FieldMappingBuilder:
        """Starts configuration of field mapping.
        If ``b`` is omitted, property with the same expression is used at B side.
        ``a_type`` and ``b_type`` replace root types for resolving of the expressions.
        """
        return FieldMappingBuilder.from_expressions(
            self,
            a,
            a if b is None else b,
            a_type=a_type,
            b_type=b_type,
            source_mapped_on_null=self._map_nulls_in_reverse,
            destination_mapped_on_null=self._map_nulls,
        )

    def field(self, a: str, b: Optional[str] = None) -> "ClassMappingBuilder":
        self.field_map(a, b).add()
        return self

    def field_a_to_b(self, a: str, b: Optional[str] = None) -> "ClassMappingBuilder":
        self.field_map(a, b).a_to_b().add()
        return self

    def field_b_to_a(self, a: str, b: Optional[str] = None) -> "ClassMappingBuilder":
        self.field_map(a, b).b_to_a().add()
        return self

    def exclude(self, name: str) -> "ClassMappingBuilder":
        """Registers property existing at both sides as excluded"""
        self.field_map(name).exclude().add()
        return self

    def map_nulls(self, value: bool) -> "ClassMappingBuilder":
        """Sets ``map_nulls`` policy for field mappings created after this call"""
        check_bool("map_nulls", value)
        self._map_nulls = value
        return self

    def map_nulls_in_reverse(self, value: bool) -> "ClassMappingBuilder":
        """Sets ``map_nulls_in_reverse`` policy for field mappings created after this call"""
        check_bool("map_nulls_in_reverse", value)
        self._map_nulls_in_reverse = value
        return self

    def by_default(self, *excluded_names: str) -> "ClassMappingBuilder":
        """Maps every property that has the same name at both sides
        and is not mapped yet
        """
        mapped_a = {_root_name(fm.a_property) for fm in self._field_mappings}
        mapped_b = {_root_name(fm.b_property) for fm in self._field_mappings}
        b_names = set(self._resolver.get_property_names(self._b_type))

        added = []
        for name in self._resolver.get_property_names(self._a_type):
            if name in excluded_names or name in mapped_a or name in mapped_b or name not in b_names:
                continue
            FieldMappingBuilder.from_expressions(
                self,
                name,
                name,
                by_default=True,
                source_mapped_on_null=self._map_nulls_in_reverse,
                destination_mapped_on_null=self._map_nulls,
            ).add()
            added.append(name)

        logger.debug("Properties %s are mapped by default", added)
        return self

    def build(self) -> ClassMapping:
        return ClassMapping(
            a_type=self._a_type,
            b_type=self._b_type,
            field_mappings=tuple(self._field_mappings),
            map_nulls=self._map_nulls,
            map_nulls_in_reverse=self._map_nulls_in_reverse,
        )

    def __repr__(self):
        return f"{type(self).__name__}({self._a_type.hint!r}, {self._b_type.hint!r})"
