from fieldmap._internal.errors import (
    BuilderFinalizedError,
    FieldMappingError,
    InvalidPropertyPathError,
    PropertyResolutionError,
)

__all__ = (
    "BuilderFinalizedError",
    "FieldMappingError",
    "InvalidPropertyPathError",
    "PropertyResolutionError",
)
