import types
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, Union, get_args, get_origin

from ..common import TypeHint, VarTuple
from ..feature_requirement import HAS_PY_310
from .basic_utils import is_named_tuple_class, is_subclass_soft, is_typed_dict_class, strip_alias, strip_tags

_UNION_ORIGINS: VarTuple[Any] = (Union, types.UnionType) if HAS_PY_310 else (Union, )  # type: ignore[attr-defined]
_NOT_CONTAINERS = (str, bytes, bytearray, memoryview)


def _strip_optional(type_hint: TypeHint) -> TypeHint:
    if get_origin(type_hint) not in _UNION_ORIGINS:
        return type_hint
    args = [arg for arg in get_args(type_hint) if arg is not type(None)]
    if len(args) == 1:
        return args[0]
    return type_hint


@dataclass(frozen=True)
class TypeDescriptor:
    """Type hint of a property together with its classification.

    ``Annotated``, ``Final`` and ``ClassVar`` wrappers and ``Optional`` are
    seen through, so ``Optional[list[Tag]]`` is a container of ``Tag``.
    Raw classes without parameters report ``Any`` as their element type.
    """
    hint: TypeHint
    bare: TypeHint = field(init=False, repr=False, compare=False, hash=False)
    origin: TypeHint = field(init=False, repr=False, compare=False, hash=False)

    def __post_init__(self):
        bare = _strip_optional(strip_tags(self.hint))
        super().__setattr__("bare", bare)
        super().__setattr__("origin", strip_alias(bare))

    @classmethod
    def of(cls, type_hint: Union["TypeDescriptor", TypeHint]) -> "TypeDescriptor":
        if isinstance(type_hint, TypeDescriptor):
            return type_hint
        return cls(type_hint)

    @classmethod
    def from_raw(cls, raw_type: type) -> "TypeDescriptor":
        if not isinstance(raw_type, type):
            raise TypeError(f"Raw type must be a class, got {raw_type!r}")
        return cls(raw_type)

    @property
    def args(self) -> VarTuple[TypeHint]:
        return get_args(self.bare)

    @property
    def is_mapping(self) -> bool:
        return is_subclass_soft(self.origin, Mapping) and not is_typed_dict_class(self.origin)

    @property
    def is_container(self) -> bool:
        if is_subclass_soft(self.origin, Mapping) or is_named_tuple_class(self.origin):
            return False
        if is_subclass_soft(self.origin, _NOT_CONTAINERS):
            return False
        if not is_subclass_soft(self.origin, Iterable):
            return False
        if is_subclass_soft(self.origin, tuple):
            args = self.args
            return not args or (len(args) == 2 and args[1] is Ellipsis)  # noqa: PLR2004
        return True

    @property
    def element_type(self) -> "TypeDescriptor":
        if not self.is_container:
            raise TypeError(f"{self.hint!r} is not a container type")
        args = self.args
        return TypeDescriptor(args[0] if args else Any)

    @property
    def key_type(self) -> "TypeDescriptor":
        return TypeDescriptor(self._mapping_args()[0])

    @property
    def value_type(self) -> "TypeDescriptor":
        return TypeDescriptor(self._mapping_args()[1])

    def _mapping_args(self) -> VarTuple[TypeHint]:
        if not self.is_mapping:
            raise TypeError(f"{self.hint!r} is not a mapping type")
        args = self.args
        if len(args) == 2:  # noqa: PLR2004
            return args
        return (Any, Any)

    def __repr__(self):
        return f"{type(self).__name__}({self.hint!r})"
