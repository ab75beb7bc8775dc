from typing import Any, TypeVar

T = TypeVar("T")

VarTuple = tuple[T, ...]

TypeHint = Any
