from collections.abc import Generator
from contextlib import contextmanager
from copy import copy
from typing import Any, Callable, TypeVar, Union, final


def _singleton_repr(self):
    return f"{type(self).__name__}()"


def _singleton_hash(self) -> int:
    return hash(type(self))


def _singleton_copy(self):
    return self


def _singleton_deepcopy(self, memo):
    return self


def _singleton_new(cls):
    return cls._instance


class SingletonMeta(type):
    def __new__(mcs, name, bases, namespace, **kwargs):
        namespace.setdefault("__repr__", _singleton_repr)
        namespace.setdefault("__str__", _singleton_repr)
        namespace.setdefault("__hash__", _singleton_hash)
        namespace.setdefault("__copy__", _singleton_copy)
        namespace.setdefault("__deepcopy__", _singleton_deepcopy)
        namespace.setdefault("__slots__", ())
        cls = super().__new__(mcs, name, bases, namespace, **kwargs)

        instance = super().__call__(cls)
        cls._instance = instance
        if "__new__" not in cls.__dict__:
            cls.__new__ = _singleton_new
        return cls

    def __call__(cls):
        return cls._instance


T = TypeVar("T")


class Omitted(metaclass=SingletonMeta):
    """Marks a setting that was never given a value.
    The consumer must fall back to its own default
    """

    def __bool__(self):
        raise TypeError("Omitted() can not be used in boolean context")


Omittable = Union[T, Omitted]


def resolve_omittable(value: Omittable[T], default: T) -> T:
    if value is Omitted():
        return default
    return value  # type: ignore[return-value]


ClassT = TypeVar("ClassT", bound=type)


def with_module(module: str) -> Callable[[ClassT], ClassT]:
    def decorator(cls):
        cls.__module__ = module
        return cls

    return decorator


C = TypeVar("C", bound="Cloneable")


class Cloneable:
    @contextmanager
    @final
    def _clone(self: C) -> Generator[C, Any, Any]:
        yield copy(self)
