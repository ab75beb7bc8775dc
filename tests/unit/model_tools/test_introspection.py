from dataclasses import dataclass, field
from typing import Any, ClassVar, Generic, NamedTuple, Optional, TypedDict, TypeVar

import pytest

from fieldmap import AttrAccessor, ItemAccessor
from fieldmap._internal.model_tools.introspection import IntrospectionError, get_property_table

T = TypeVar("T")


@dataclass
class Customer:
    name: str
    email: Optional[str] = None
    registry: ClassVar[dict] = {}
    orders: list["Order"] = field(default_factory=list)


@dataclass
class Order:
    number: int
    customer: Customer


class Point(NamedTuple):
    x: int
    y: float


class Movie(TypedDict):
    title: str
    year: int


class Plain:
    counter: ClassVar[int] = 0
    name: str
    age: int


@dataclass
class Box(Generic[T]):
    item: T


CustomerT = TypeVar("CustomerT", bound=Customer)


@dataclass
class BoundBox(Generic[CustomerT]):
    item: CustomerT


@dataclass
class Crate(Generic[T]):
    items: list[T]
    spare: Optional[T] = None


@dataclass
class IntCrate(Crate[int]):
    label: str = ""


@dataclass
class Broken:
    value: "Missing"  # type: ignore[name-defined]  # noqa: F821


def test_dataclass():
    table = get_property_table(Customer)

    assert list(table) == ["name", "email", "orders"]
    assert table["name"] == (str, AttrAccessor("name"))
    assert table["email"] == (Optional[str], AttrAccessor("email"))
    assert table["orders"] == (list[Order], AttrAccessor("orders"))


def test_named_tuple():
    assert get_property_table(Point) == {
        "x": (int, AttrAccessor("x")),
        "y": (float, AttrAccessor("y")),
    }


def test_typed_dict():
    assert get_property_table(Movie) == {
        "title": (str, ItemAccessor("title")),
        "year": (int, ItemAccessor("year")),
    }


def test_plain_class():
    assert get_property_table(Plain) == {
        "name": (str, AttrAccessor("name")),
        "age": (int, AttrAccessor("age")),
    }


def test_parametrized_generic():
    assert get_property_table(Box[int]) == {
        "item": (int, AttrAccessor("item")),
    }
    assert get_property_table(Box[list[int]]) == {
        "item": (list[int], AttrAccessor("item")),
    }


def test_parametrized_generic_nested_type_var():
    assert get_property_table(Crate[str]) == {
        "items": (list[str], AttrAccessor("items")),
        "spare": (Optional[str], AttrAccessor("spare")),
    }


def test_unparametrized_generic():
    assert get_property_table(Box) == {
        "item": (Any, AttrAccessor("item")),
    }
    assert get_property_table(BoundBox) == {
        "item": (Customer, AttrAccessor("item")),
    }


def test_generic_base():
    assert get_property_table(IntCrate) == {
        "items": (list[int], AttrAccessor("items")),
        "spare": (Optional[int], AttrAccessor("spare")),
        "label": (str, AttrAccessor("label")),
    }


def test_not_a_class():
    with pytest.raises(IntrospectionError):
        get_property_table(Optional[int])


def test_unresolved_forward_ref():
    with pytest.raises(IntrospectionError, match="Can not evaluate type hints"):
        get_property_table(Broken)
