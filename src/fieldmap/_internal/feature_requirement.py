import importlib.metadata
import sys
from abc import ABC, abstractmethod

from .common import VarTuple


def _true():
    return True


def _false():
    return False


class Requirement(ABC):
    __slots__ = ("is_met", "__bool__", "__dict__")

    def __init__(self):
        self.is_met = self._evaluate()
        self.__bool__ = _true if self.is_met else _false

    @abstractmethod
    def _evaluate(self) -> bool:
        ...


class PythonVersionRequirement(Requirement):
    def __init__(self, min_version: VarTuple[int]):
        self.min_version = min_version
        super().__init__()

    def _evaluate(self) -> bool:
        return sys.version_info >= self.min_version


class DistributionRequirement(Requirement):
    def __init__(self, distribution_name: str):
        self.distribution_name = distribution_name
        super().__init__()

    def _evaluate(self) -> bool:
        try:
            importlib.metadata.distribution(self.distribution_name)
        except importlib.metadata.PackageNotFoundError:
            return False
        return True


HAS_PY_310 = PythonVersionRequirement((3, 10))

HAS_ATTRS_PKG = DistributionRequirement("attrs")
