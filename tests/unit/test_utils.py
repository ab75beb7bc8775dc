import pickle
from copy import copy, deepcopy

import pytest

from fieldmap import Omitted
from fieldmap._internal.utils import Cloneable, SingletonMeta, resolve_omittable


class SomeSingleton(metaclass=SingletonMeta):
    pass


def test_singleton_simple():
    instance1 = SomeSingleton()
    instance2 = SomeSingleton()

    assert instance1 is instance2
    assert instance1 == instance2


def test_singleton_repr():
    assert repr(SomeSingleton()) == "SomeSingleton()"
    assert repr(Omitted()) == "Omitted()"


def test_singleton_copy():
    assert copy(SomeSingleton()) is SomeSingleton()
    assert deepcopy(SomeSingleton()) is SomeSingleton()

    assert pickle.loads(pickle.dumps(SomeSingleton())) is SomeSingleton()  # noqa: S301


def test_omitted_in_boolean_context():
    with pytest.raises(TypeError):
        bool(Omitted())


@pytest.mark.parametrize(
    ["value", "default", "result"],
    [
        (Omitted(), True, True),
        (Omitted(), False, False),
        (False, True, False),
        (True, False, True),
    ],
)
def test_resolve_omittable(value, default, result):
    assert resolve_omittable(value, default) is result


class Counter(Cloneable):
    def __init__(self):
        self.value = 0

    def increment(self):
        with self._clone() as clone:
            clone.value += 1
        return clone


def test_clone():
    counter = Counter()
    incremented = counter.increment().increment()

    assert counter.value == 0
    assert incremented.value == 2
