import inspect
import types
from collections.abc import Iterable, Mapping
from dataclasses import InitVar
from typing import Annotated, ClassVar, Final, TypedDict, TypeVar, get_args, get_origin, get_type_hints

from ..common import TypeHint, VarTuple
from ..feature_requirement import HAS_PY_310

TYPED_DICT_MCS = type(types.new_class("_TypedDictSample", (TypedDict,), {}))

_TYPE_TAGS = (Final, ClassVar, Annotated)


def strip_alias(type_hint: TypeHint) -> TypeHint:
    origin = get_origin(type_hint)
    return type_hint if origin is None else origin


def strip_tags(type_hint: TypeHint) -> TypeHint:
    """Removes type hints that does not represent type
    and that only indicates metadata
    """
    if get_origin(type_hint) in _TYPE_TAGS:
        return strip_tags(get_args(type_hint)[0])
    if isinstance(type_hint, InitVar):
        return strip_tags(type_hint.type)
    return type_hint


def is_subclass_soft(cls, classinfo) -> bool:
    """Acts like builtin issubclass,
     but returns False instead of rising TypeError
    """
    try:
        return issubclass(cls, classinfo)
    except TypeError:
        return False


def has_attrs(obj, attrs: Iterable[str]) -> bool:
    return all(
        hasattr(obj, attr_name)
        for attr_name in attrs
    )


def is_typed_dict_class(tp) -> bool:
    return isinstance(tp, TYPED_DICT_MCS)


NAMED_TUPLE_METHODS = ("_fields", "_field_defaults", "_make", "_replace", "_asdict")


def is_named_tuple_class(tp) -> bool:
    return (
        is_subclass_soft(tp, tuple)
        and
        has_attrs(tp, NAMED_TUPLE_METHODS)
    )


def get_all_type_hints(obj, globalns=None, localns=None):
    return get_type_hints(obj, globalns, localns, include_extras=True)


def is_parametrized(tp: TypeHint) -> bool:
    return bool(get_args(tp))


def get_type_vars(tp: TypeHint) -> VarTuple[TypeVar]:
    return getattr(tp, "__parameters__", ())


def is_generic(tp: TypeHint) -> bool:
    """Tells whether the class declares type parameters and is not parametrized"""
    return isinstance(tp, type) and bool(get_type_vars(tp))


def get_type_vars_of_parametrized(tp: TypeHint) -> VarTuple[TypeVar]:
    if not is_parametrized(tp):
        return ()
    return get_type_vars(tp)


def get_own_annotations(tp: type) -> Mapping[str, TypeHint]:
    if HAS_PY_310:
        return inspect.get_annotations(tp)
    return vars(tp).get("__annotations__", {})
