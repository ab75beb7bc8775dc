import dataclasses
from dataclasses import dataclass
from functools import partial
from typing import Optional

from .common import TypeHint
from .utils import with_module


def _str_by_fields(cls):
    field_names = [fld.name for fld in dataclasses.fields(cls)]

    def __str__(self):  # noqa: N807
        return ", ".join(f"{name}={getattr(self, name)!r}" for name in field_names)

    cls.__str__ = __str__
    return cls


def custom_exception(cls=None, /, *, str_by_fields: bool = True, public_module: bool = True):
    if cls is None:
        return partial(custom_exception, str_by_fields=str_by_fields, public_module=public_module)

    if str_by_fields:
        cls = _str_by_fields(cls)
    if public_module:
        cls = with_module("fieldmap.errors")(cls)
    return cls


# __init__ of these classes do not call super().__init__, but it's ok!
# BaseException.__init__ does nothing useful


@custom_exception(str_by_fields=False)
@dataclass(eq=False, init=False)
class FieldMappingError(Exception):
    """The base class for the exceptions that are raised
    while field mappings are being configured
    """


@custom_exception
@dataclass(eq=False)
class InvalidPropertyPathError(FieldMappingError):
    """Property path has a bracket that is not closed at the end of the path"""

    path: str


@custom_exception
@dataclass(eq=False)
class PropertyResolutionError(FieldMappingError):
    """Property path does not denote an accessible property of the owner type"""

    owner: TypeHint
    expression: str
    reason: Optional[str] = None


@custom_exception
@dataclass(eq=False)
class BuilderFinalizedError(FieldMappingError):
    """Field mapping builder was already added to its class mapping builder,
    so it can not be configured or added again
    """

    a_expression: str
    b_expression: str
