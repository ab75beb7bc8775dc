from typing import Optional

from ..errors import InvalidPropertyPathError


def split_at_root_property(path: str) -> tuple[str, Optional[str]]:
    """Divides property path into the root segment and the bracketed payload.

    Only the first ``[`` is taken into account, the payload keeps
    any nested brackets untouched::

        >>> split_at_root_property("addresses[primary]")
        ('addresses', 'primary')
        >>> split_at_root_property("items[prices[0]]")
        ('items', 'prices[0]')
        >>> split_at_root_property("name")
        ('name', None)
    """
    root, bracket, rest = path.partition("[")
    if not bracket:
        return path, None
    if not rest.endswith("]"):
        raise InvalidPropertyPathError(path)
    return root, rest[:-1]


def split_into_segments(expression: str) -> list[str]:
    """Splits dotted expression ignoring dots inside of brackets"""
    segments = []
    depth = 0
    start = 0
    for idx, char in enumerate(expression):
        if char == "[":
            depth += 1
        elif char == "]" and depth > 0:
            depth -= 1
        elif char == "." and depth == 0:
            segments.append(expression[start:idx])
            start = idx + 1
    segments.append(expression[start:])
    return segments
