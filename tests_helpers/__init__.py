import re
from collections.abc import Iterable, Mapping
from typing import Any, Callable, Union

from fieldmap import (
    Property,
    PropertyResolutionError,
    PropertyResolver,
    TypeDescriptor,
    TypeHint,
    split_at_root_property,
)
from fieldmap._internal.model_tools.definitions import create_attr_accessor


def full_match_regex_str(string_to_match: str) -> str:
    return "^" + re.escape(string_to_match) + "$"


def cond_list(flag: object, lst: Union[Callable[[], list], list]) -> list:
    if flag:
        return lst() if callable(lst) else lst
    return []


class FakePropertyResolver(PropertyResolver):
    """Resolves plain property names from a predefined table
    and remembers every owner it was asked about
    """

    def __init__(self, table: Mapping[Any, Mapping[str, TypeHint]]):
        self.table = table
        self.requests: list[tuple[TypeHint, str]] = []

    def resolve_property(self, owner: Union[TypeDescriptor, TypeHint], expression: str) -> Property:
        descriptor = TypeDescriptor.of(owner)
        self.requests.append((descriptor.hint, expression))
        name, _ = split_at_root_property(expression)
        try:
            type_hint = self.table[descriptor.hint][name]
        except KeyError:
            raise PropertyResolutionError(descriptor.hint, expression) from None
        return Property(
            name=name,
            expression=expression,
            type=TypeDescriptor(type_hint),
            accessor=create_attr_accessor(name),
            owner=descriptor.hint,
        )

    def get_property_names(self, owner: Union[TypeDescriptor, TypeHint]) -> Iterable[str]:
        return list(self.table.get(TypeDescriptor.of(owner).hint, {}))


def make_property(name: str, tp: TypeHint, owner: TypeHint = None) -> Property:
    return Property(
        name=name,
        expression=name,
        type=TypeDescriptor(tp),
        accessor=create_attr_accessor(name),
        owner=owner,
    )
