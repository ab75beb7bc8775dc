from ._internal.common import TypeHint
from ._internal.mapping.class_builder import ClassMappingBuilder
from ._internal.mapping.definitions import ClassMapping, FieldMapping, MappingDirection
from ._internal.mapping.field_builder import FieldMappingBuilder, FieldMappingHost
from ._internal.mapping.map_entry import describe_map_keys, describe_map_values
from ._internal.mapping.path import split_at_root_property
from ._internal.mapping.resolver import IntrospectionPropertyResolver, PropertyResolver
from ._internal.model_tools.definitions import Accessor, AttrAccessor, ItemAccessor, MapEntry, Property
from ._internal.type_tools import TypeDescriptor
from ._internal.utils import Omittable, Omitted
from .errors import BuilderFinalizedError, FieldMappingError, InvalidPropertyPathError, PropertyResolutionError

__all__ = (
    "Accessor",
    "AttrAccessor",
    "BuilderFinalizedError",
    "ClassMapping",
    "ClassMappingBuilder",
    "FieldMapping",
    "FieldMappingBuilder",
    "FieldMappingError",
    "FieldMappingHost",
    "IntrospectionPropertyResolver",
    "InvalidPropertyPathError",
    "ItemAccessor",
    "MapEntry",
    "MappingDirection",
    "Omittable",
    "Omitted",
    "Property",
    "PropertyResolutionError",
    "PropertyResolver",
    "TypeDescriptor",
    "TypeHint",
    "describe_map_keys",
    "describe_map_values",
    "split_at_root_property",
)
