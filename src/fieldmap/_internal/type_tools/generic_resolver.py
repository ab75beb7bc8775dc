from collections.abc import Collection, Hashable, Mapping
from dataclasses import dataclass, replace
from typing import Any, Callable, Dict, Generic, TypeVar, Union, get_args

from ..common import TypeHint
from .basic_utils import get_type_vars, get_type_vars_of_parametrized, is_generic, is_parametrized, strip_alias

M = TypeVar("M")
K = TypeVar("K", bound=Hashable)


@dataclass
class MembersStorage(Generic[K, M]):
    members: Mapping[K, TypeHint]
    overriden: Collection[K]
    meta: M


def _implicit_param(type_var: TypeVar) -> TypeHint:
    if type_var.__bound__ is not None:
        return type_var.__bound__
    if type_var.__constraints__:
        return Union[type_var.__constraints__]
    return Any


def fill_implicit_params(tp: TypeHint) -> TypeHint:
    """Parametrizes generic class by bounds of its type variables"""
    return tp[tuple(_implicit_param(type_var) for type_var in get_type_vars(tp))]


class GenericResolver(Generic[K, M]):
    """Substitutes type variables at member types of generic classes.
    Members inherited from parametrized generic bases are substituted too
    unless the class overrides them
    """

    def __init__(self, members_getter: Callable[[TypeHint], MembersStorage[K, M]]):
        self._raw_members_getter = members_getter

    def get_resolved_members(self, tp: TypeHint) -> MembersStorage[K, M]:
        if is_parametrized(tp):
            return self._get_members_of_parametrized_generic(tp)
        if is_generic(tp):
            return self._get_members_of_parametrized_generic(fill_implicit_params(tp))
        return self._get_members_by_parents(tp)

    def _get_members_of_parametrized_generic(self, parametrized_generic) -> MembersStorage[K, M]:
        origin = strip_alias(parametrized_generic)
        members_storage = self._get_members_by_parents(origin)
        type_var_to_actual = dict(
            zip(
                get_type_vars(origin),
                get_args(parametrized_generic),
            ),
        )
        return replace(
            members_storage,
            members={
                key: self._parametrize_by_dict(type_var_to_actual, tp)
                for key, tp in members_storage.members.items()
            },
        )

    def _parametrize_by_dict(self, type_var_to_actual: Mapping[TypeVar, TypeHint], tp: TypeHint) -> TypeHint:
        if isinstance(tp, TypeVar):
            return type_var_to_actual.get(tp, tp)

        params = get_type_vars_of_parametrized(tp)
        if not params:
            return tp
        return tp[tuple(type_var_to_actual.get(type_var, type_var) for type_var in params)]

    def _get_members_by_parents(self, tp) -> MembersStorage[K, M]:
        members_storage = self._raw_members_getter(tp)
        if not any(
            get_type_vars_of_parametrized(member_tp) or isinstance(member_tp, TypeVar)
            for member_tp in members_storage.members.values()
        ):
            return members_storage
        if not hasattr(tp, "__orig_bases__"):
            return members_storage

        bases_members: Dict[K, TypeHint] = {}
        for base in reversed(tp.__orig_bases__):
            bases_members.update(self.get_resolved_members(base).members)

        return replace(
            members_storage,
            members={
                key: (
                    bases_members[key]
                    if key in bases_members and key not in members_storage.overriden else
                    value
                )
                for key, value in members_storage.members.items()
            },
        )
