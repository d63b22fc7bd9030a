from __future__ import annotations

import dataclasses
import keyword
import typing as t

from pydantic import BaseModel

from aspect_attributes.exceptions import InvalidArgument


def to_identifier(name) -> str:
    """Coerce ``name`` into an attribute name. Accepts ``str`` and ASCII ``bytes``, surrounding
    whitespace is ignored. Raises ``InvalidArgument`` for anything that is not a valid,
    non-keyword, Python identifier
    """
    if isinstance(name, bytes):
        try:
            name = name.decode("ascii")
        except UnicodeDecodeError as e:
            raise InvalidArgument(f"Invalid attribute name {name!r}") from e
    if not isinstance(name, str):
        raise InvalidArgument(
            f"Attribute name must be a string, not '{type(name).__name__}'"
        )
    name = name.strip()
    if not name.isidentifier() or keyword.iskeyword(name):
        raise InvalidArgument(f"Invalid attribute name {name!r}")
    return name


def to_mapping(obj) -> t.Mapping[str, t.Any]:
    """Best effort conversion of ``obj`` into a mapping. Supports mappings, named tuples,
    dataclass instances, pydantic models and iterables of key-value pairs. ``None`` gives an
    empty mapping
    """
    if obj is None:
        return {}
    if isinstance(obj, t.Mapping):
        return obj
    if isinstance(obj, tuple) and hasattr(obj, "_asdict"):
        return obj._asdict()
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)}
    if isinstance(obj, BaseModel):
        return {key: getattr(obj, key) for key in type(obj).model_fields}
    if isinstance(obj, (str, bytes)):
        raise InvalidArgument(f"Cannot convert '{type(obj).__name__}' to a mapping")
    try:
        return dict(obj)
    except (TypeError, ValueError) as e:
        raise InvalidArgument(f"Cannot convert '{type(obj).__name__}' to a mapping") from e
