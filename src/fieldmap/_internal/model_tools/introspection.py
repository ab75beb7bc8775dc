from collections.abc import Mapping
from dataclasses import fields as dc_fields, is_dataclass
from functools import lru_cache
from typing import Any, ClassVar, get_origin

from ..common import TypeHint
from ..type_tools import (
    GenericResolver,
    MembersStorage,
    get_all_type_hints,
    get_own_annotations,
    is_named_tuple_class,
    is_typed_dict_class,
    strip_tags,
)
from .definitions import Accessor, create_attr_accessor, create_key_accessor

try:
    import attrs
except ImportError:
    attrs = None  # type: ignore[assignment]


class IntrospectionError(Exception):
    def __init__(self, description: str):
        self.description = description
        super().__init__(description)


PropertyTable = dict[str, tuple[TypeHint, Accessor]]


def _get_type_hints(tp) -> dict[str, TypeHint]:
    try:
        return get_all_type_hints(tp)
    except NameError as e:
        raise IntrospectionError(f"Can not evaluate type hints of {tp!r}: {e}") from None


def _get_dataclass_properties(tp) -> PropertyTable:
    type_hints = _get_type_hints(tp)
    return {
        fld.name: (type_hints.get(fld.name, Any), create_attr_accessor(fld.name))
        for fld in dc_fields(tp)
    }


def _get_attrs_properties(tp) -> PropertyTable:
    type_hints = _get_type_hints(tp)
    return {
        fld.name: (
            type_hints.get(fld.name, Any if fld.type is None else fld.type),
            create_attr_accessor(fld.name),
        )
        for fld in attrs.fields(tp)
    }


def _get_named_tuple_properties(tp) -> PropertyTable:
    type_hints = _get_type_hints(tp)
    return {
        name: (type_hints.get(name, Any), create_attr_accessor(name))
        for name in tp._fields
    }


def _get_typed_dict_properties(tp) -> PropertyTable:
    return {
        name: (type_hint, create_key_accessor(name))
        for name, type_hint in _get_type_hints(tp).items()
    }


def _get_annotated_class_properties(tp) -> PropertyTable:
    return {
        name: (type_hint, create_attr_accessor(name))
        for name, type_hint in _get_type_hints(tp).items()
        if get_origin(type_hint) is not ClassVar
    }


def _get_properties(tp) -> PropertyTable:
    if not isinstance(tp, type):
        raise IntrospectionError(f"{tp!r} is not a class")
    if is_dataclass(tp):
        return _get_dataclass_properties(tp)
    if attrs is not None and attrs.has(tp):
        return _get_attrs_properties(tp)
    if is_named_tuple_class(tp):
        return _get_named_tuple_properties(tp)
    if is_typed_dict_class(tp):
        return _get_typed_dict_properties(tp)
    return _get_annotated_class_properties(tp)


def _get_members(tp) -> MembersStorage[str, Mapping[str, Accessor]]:
    table = _get_properties(tp)
    return MembersStorage(
        members={name: type_hint for name, (type_hint, accessor) in table.items()},
        overriden=get_own_annotations(tp).keys(),
        meta={name: accessor for name, (type_hint, accessor) in table.items()},
    )


_generic_resolver = GenericResolver(_get_members)


@lru_cache(maxsize=256)
def get_property_table(tp: TypeHint) -> PropertyTable:
    """Returns properties declared by the class.
    Type variables are replaced with parameters of a generic alias,
    unparametrized generics are treated as parametrized by bounds of their type variables
    """
    members_storage = _generic_resolver.get_resolved_members(strip_tags(tp))
    return {
        name: (type_hint, members_storage.meta[name])
        for name, type_hint in members_storage.members.items()
    }
