from __future__ import annotations

import inspect
import logging
import typing as t

from aspect_attributes.exceptions import UnknownAttribute
from aspect_attributes.utils.conversion import to_mapping

logger = logging.getLogger(__name__)

T = t.TypeVar("T")


def update_attributes(instance: T, attributes=None, /, **kwargs) -> T:
    """Mass assign attributes on ``instance`` by calling the setter for every key in
    ``attributes`` (followed by ``kwargs``) in iteration order. ``attributes`` may be any mapping,
    or any object that can be converted into one (see ``to_mapping``).

    Raises ``UnknownAttribute`` at the first key that doesn't have a setter. Keys that were
    processed before that remain set. Returns ``instance``
    """
    attributes = to_mapping(attributes)
    for items in (attributes.items(), kwargs.items()):
        for name, value in items:
            if not has_setter(instance, name):
                raise UnknownAttribute(name, type(instance))
            setattr(instance, name, value)
    logger.debug(
        "Updated %d attribute(s) on %s", len(attributes) + len(kwargs), type(instance).__name__
    )
    return instance


def has_setter(instance, name) -> bool:
    """Whether ``name`` can be assigned on ``instance``: either through a descriptor that
    supports setting, a plain class level value, an annotation or an existing
    instance attribute. Methods are never considered setters
    """
    if not isinstance(name, str) or not name.isidentifier() or _is_dunder(name):
        return False
    cls = type(instance)
    for klass in cls.__mro__:
        if name in vars(klass):
            return _is_settable(vars(klass)[name])

    if name in getattr(instance, "__dict__", {}):
        return True
    return any(name in inspect.get_annotations(klass) for klass in cls.__mro__)


def _is_settable(attr) -> bool:
    if isinstance(attr, property):
        return attr.fset is not None
    if hasattr(type(attr), "__set__"):
        return getattr(attr, "writable", True)
    if inspect.isroutine(attr) or isinstance(attr, (classmethod, staticmethod, type)):
        return False
    return True


def _is_dunder(name: str):
    return name.startswith("__") and name.endswith("__")
