from .basic_utils import (
    get_all_type_hints,
    get_own_annotations,
    get_type_vars,
    get_type_vars_of_parametrized,
    is_generic,
    is_named_tuple_class,
    is_parametrized,
    is_subclass_soft,
    is_typed_dict_class,
    strip_alias,
    strip_tags,
)
from .descriptor import TypeDescriptor
from .generic_resolver import GenericResolver, MembersStorage
