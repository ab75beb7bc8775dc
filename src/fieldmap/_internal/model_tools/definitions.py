from abc import ABC, abstractmethod
from collections.abc import Hashable
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Generic, Optional, TypeVar, Union

from ..common import TypeHint, VarTuple
from ..type_tools import TypeDescriptor

K = TypeVar("K")
V = TypeVar("V")


class Accessor(Hashable, ABC):
    @property
    @abstractmethod
    def getter(self) -> Callable[[Any], Any]:
        ...

    @property
    @abstractmethod
    def setter(self) -> Callable[[Any, Any], None]:
        ...


class AttrAccessor(Accessor):
    def __init__(self, attr_name: str):
        self._attr_name = attr_name

    # noinspection PyMethodOverriding
    def getter(self, obj):
        return getattr(obj, self._attr_name)

    # noinspection PyMethodOverriding
    def setter(self, obj, value):
        setattr(obj, self._attr_name, value)

    @property
    def attr_name(self) -> str:
        return self._attr_name

    def __eq__(self, other):
        if isinstance(other, AttrAccessor):
            return self._attr_name == other._attr_name
        return NotImplemented

    def __hash__(self):
        return hash(self._attr_name)

    def __repr__(self):
        return f"{type(self).__qualname__}(attr_name={self.attr_name!r})"


class ItemAccessor(Accessor):
    def __init__(self, key: Union[int, str]):
        self.key = key

    # noinspection PyMethodOverriding
    def getter(self, obj):
        return obj[self.key]

    # noinspection PyMethodOverriding
    def setter(self, obj, value):
        obj[self.key] = value

    def __eq__(self, other):
        if isinstance(other, ItemAccessor):
            return self.key == other.key
        return NotImplemented

    def __hash__(self):
        try:
            return hash(self.key)
        except TypeError:
            return 236  # some random number that fits in byte

    def __repr__(self):
        return f"{type(self).__qualname__}(key={self.key!r})"


def create_attr_accessor(attr_name: str) -> AttrAccessor:
    return AttrAccessor(attr_name)


def create_key_accessor(key: Union[int, str]) -> ItemAccessor:
    return ItemAccessor(key)


@dataclass(frozen=True)
class Property:
    """Reference to a property of some owner type.

    :param name: Name of the last segment of the expression
    :param expression: Full path used to resolve the property, e.g. ``address.city``
    :param type: Declared type of the property
    :param accessor: The way to read and write the value on the owner instance
    :param owner: Type declaring the property
    :param element_type_override: Element type set explicitly
        for containers whose element type can not be inferred
    :param parents: Properties to go through to reach the owner of a nested property
    """
    name: str
    expression: str
    type: TypeDescriptor
    accessor: Accessor
    owner: TypeHint = field(default=None, compare=False)
    element_type_override: Optional[TypeDescriptor] = None
    parents: VarTuple["Property"] = ()

    @property
    def is_container(self) -> bool:
        return self.type.is_container

    @property
    def is_nested(self) -> bool:
        return bool(self.parents)

    @property
    def element_type(self) -> TypeDescriptor:
        if self.element_type_override is not None:
            return self.element_type_override
        return self.type.element_type

    @property
    def inverse_owner_type(self) -> TypeDescriptor:
        """Type where the inverse property of this one is looked up"""
        if self.is_container:
            return self.element_type
        return self.type

    def with_element_type(self, element_type: Union[TypeDescriptor, TypeHint]) -> "Property":
        return replace(self, element_type_override=TypeDescriptor.of(element_type))

    def copy(self, tp: Union[TypeDescriptor, TypeHint]) -> "Property":
        return replace(self, type=TypeDescriptor.of(tp), element_type_override=None)


@dataclass
class MapEntry(Generic[K, V]):
    """Key-value pair of a mapping,
    it is the owner of properties describing mapping keys and values
    """
    key: K
    value: V
