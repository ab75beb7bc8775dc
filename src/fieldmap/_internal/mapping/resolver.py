from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Optional, Union

from ..common import TypeHint, VarTuple
from ..errors import PropertyResolutionError
from ..model_tools.definitions import Property, create_key_accessor
from ..model_tools.introspection import IntrospectionError, get_property_table
from ..type_tools import TypeDescriptor
from .path import split_at_root_property, split_into_segments


class PropertyResolver(ABC):
    @abstractmethod
    def resolve_property(self, owner: Union[TypeDescriptor, TypeHint], expression: str) -> Property:
        """Finds property denoted by the expression at the owner type.

        :raise PropertyResolutionError: expression does not denote an accessible property
        :raise InvalidPropertyPathError: expression contains malformed brackets
        """

    @abstractmethod
    def get_property_names(self, owner: Union[TypeDescriptor, TypeHint]) -> Iterable[str]:
        """Returns names of properties declared by the owner type in the declaration order"""


class IntrospectionPropertyResolver(PropertyResolver):
    """Resolves properties of dataclasses, attrs classes, named tuples,
    typed dicts and plain annotated classes.

    Expression is a dot separated chain of property names,
    each name may be followed by a bracketed item:
    an index for containers and a key for mappings.
    """

    def resolve_property(self, owner: Union[TypeDescriptor, TypeHint], expression: str) -> Property:
        root = TypeDescriptor.of(owner)
        segments = split_into_segments(expression)

        parents: VarTuple[Property] = ()
        current_owner = root
        prop: Optional[Property] = None
        for idx, segment in enumerate(segments):
            if not segment:
                raise PropertyResolutionError(root.hint, expression, "Expression contains an empty segment")
            prop = self._resolve_segment(
                root=root,
                owner=current_owner,
                segment=segment,
                expression=".".join(segments[:idx + 1]),
                parents=parents,
            )
            parents = (*prop.parents, prop)
            current_owner = prop.type
        return prop  # type: ignore[return-value]

    def get_property_names(self, owner: Union[TypeDescriptor, TypeHint]) -> Iterable[str]:
        descriptor = TypeDescriptor.of(owner)
        try:
            return list(get_property_table(descriptor.bare))
        except IntrospectionError as e:
            raise PropertyResolutionError(descriptor.hint, "", e.description) from None

    def _resolve_segment(
        self,
        root: TypeDescriptor,
        owner: TypeDescriptor,
        segment: str,
        expression: str,
        parents: VarTuple[Property],
    ) -> Property:
        name, item = split_at_root_property(segment)
        try:
            table = get_property_table(owner.bare)
        except IntrospectionError as e:
            raise PropertyResolutionError(root.hint, expression, e.description) from None

        try:
            type_hint, accessor = table[name]
        except KeyError:
            raise PropertyResolutionError(
                root.hint,
                expression,
                f"{name!r} is not a property of {owner.bare!r}",
            ) from None

        prop = Property(
            name=name,
            expression=expression,
            type=TypeDescriptor(type_hint),
            accessor=accessor,
            owner=owner.bare,
            parents=parents,
        )
        if item is None:
            return prop
        return self._resolve_item(root, prop, item, expression)

    def _resolve_item(self, root: TypeDescriptor, prop: Property, item: str, expression: str) -> Property:
        if prop.type.is_mapping:
            return Property(
                name=f"{prop.name}[{item}]",
                expression=expression,
                type=prop.type.value_type,
                accessor=create_key_accessor(item),
                owner=prop.type.bare,
                parents=(*prop.parents, prop),
            )
        if prop.is_container and item.isdigit():
            return Property(
                name=f"{prop.name}[{item}]",
                expression=expression,
                type=prop.element_type,
                accessor=create_key_accessor(int(item)),
                owner=prop.type.bare,
                parents=(*prop.parents, prop),
            )
        raise PropertyResolutionError(
            root.hint,
            expression,
            f"{item!r} can not be used to get an item of {prop.type.hint!r}",
        )
