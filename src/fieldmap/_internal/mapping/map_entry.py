from typing import Union

from ..common import TypeHint
from ..model_tools.definitions import MapEntry, Property, create_attr_accessor
from ..type_tools import TypeDescriptor
from .definitions import FieldMapping, MappingDirection


def _describe_entry_part(name: str, a_type: Union[TypeDescriptor, TypeHint], b_type: Union[TypeDescriptor, TypeHint]):
    a_property = Property(
        name=name,
        expression=name,
        type=TypeDescriptor.of(a_type),
        accessor=create_attr_accessor(name),
        owner=MapEntry,
    )
    b_property = a_property.copy(b_type)
    return FieldMapping(
        a_property=a_property,
        b_property=b_property,
        direction=MappingDirection.A_TO_B,
    )


def describe_map_keys(a_type: Union[TypeDescriptor, TypeHint], b_type: Union[TypeDescriptor, TypeHint]) -> FieldMapping:
    """Creates mapping of keys of A side mapping to keys of B side mapping"""
    return _describe_entry_part("key", a_type, b_type)


def describe_map_values(a_type: Union[TypeDescriptor, TypeHint], b_type: Union[TypeDescriptor, TypeHint]) -> FieldMapping:
    """Creates mapping of values of A side mapping to values of B side mapping"""
    return _describe_entry_part("value", a_type, b_type)
