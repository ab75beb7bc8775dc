from dataclasses import dataclass
from typing import Optional, Union

import pytest
from tests_helpers import full_match_regex_str

from fieldmap import (
    AttrAccessor,
    IntrospectionPropertyResolver,
    InvalidPropertyPathError,
    ItemAccessor,
    PropertyResolutionError,
    TypeDescriptor,
)


@dataclass
class Address:
    city: str
    street: str


@dataclass
class Tag:
    name: str


@dataclass
class Person:
    name: str
    address: Optional[Address]
    addresses: dict[str, Address]
    tags: list[Tag]
    nicknames: list


@pytest.fixture
def resolver():
    return IntrospectionPropertyResolver()


def test_simple(resolver):
    prop = resolver.resolve_property(Person, "name")

    assert prop.name == "name"
    assert prop.expression == "name"
    assert prop.type == TypeDescriptor(str)
    assert prop.accessor == AttrAccessor("name")
    assert prop.owner is Person
    assert not prop.is_nested


def test_accepts_type_descriptor(resolver):
    assert resolver.resolve_property(TypeDescriptor(Person), "tags").type == TypeDescriptor(list[Tag])


def test_nested(resolver):
    prop = resolver.resolve_property(Person, "address.city")

    assert prop.name == "city"
    assert prop.expression == "address.city"
    assert prop.type == TypeDescriptor(str)
    assert prop.owner is Address
    assert [parent.expression for parent in prop.parents] == ["address"]


def test_mapping_item(resolver):
    prop = resolver.resolve_property(Person, "addresses[primary]")

    assert prop.name == "addresses[primary]"
    assert prop.type == TypeDescriptor(Address)
    assert prop.accessor == ItemAccessor("primary")
    assert [parent.name for parent in prop.parents] == ["addresses"]


def test_mapping_item_nested(resolver):
    prop = resolver.resolve_property(Person, "addresses[primary].city")

    assert prop.expression == "addresses[primary].city"
    assert prop.type == TypeDescriptor(str)
    assert [parent.name for parent in prop.parents] == ["addresses", "addresses[primary]"]


def test_container_item(resolver):
    prop = resolver.resolve_property(Person, "tags[0].name")

    assert prop.type == TypeDescriptor(str)
    assert prop.parents[-1].accessor == ItemAccessor(0)
    assert prop.parents[-1].type == TypeDescriptor(Tag)


def test_bad_container_item(resolver):
    with pytest.raises(PropertyResolutionError) as exc_info:
        resolver.resolve_property(Person, "tags[first]")

    assert exc_info.value.owner is Person
    assert exc_info.value.expression == "tags[first]"


def test_item_of_scalar(resolver):
    with pytest.raises(PropertyResolutionError):
        resolver.resolve_property(Person, "name[0]")


def test_unknown_property(resolver):
    with pytest.raises(
        PropertyResolutionError,
        match=full_match_regex_str(
            f"owner={Person!r}, expression='address.zip',"
            f" reason=\"'zip' is not a property of {Address!r}\"",
        ),
    ):
        resolver.resolve_property(Person, "address.zip")


def test_empty_segment(resolver):
    with pytest.raises(PropertyResolutionError):
        resolver.resolve_property(Person, "address..city")


def test_raw_container_elements_are_unknown(resolver):
    with pytest.raises(PropertyResolutionError):
        resolver.resolve_property(Person, "nicknames[0].name")


def test_invalid_path(resolver):
    with pytest.raises(InvalidPropertyPathError):
        resolver.resolve_property(Person, "addresses[primary")


def test_not_a_class(resolver):
    with pytest.raises(PropertyResolutionError, match="is not a class"):
        resolver.resolve_property(Union[int, str], "real")


def test_get_property_names(resolver):
    assert list(resolver.get_property_names(Person)) == ["name", "address", "addresses", "tags", "nicknames"]
    assert list(resolver.get_property_names(TypeDescriptor(Address))) == ["city", "street"]
