from __future__ import annotations

import inspect
import itertools
import types
import typing as t

from aspect_attributes.exceptions import InvalidArgument
from aspect_attributes.settings import get_settings

from .attribute import AttributeField, define_attribute
from .update import update_attributes

_UNSET = object()
_MISSING = object()


class HasAttributes:
    """Mixin that adds the ``attribute`` class method to define attributes and the
    ``update_attributes`` method for mass assignment. Both entry points can be renamed, or left
    out by giving a falsey name, through class keywords::

        class User(HasAttributes, update_method="assign", attribute_method=None):
            name = field(transform=lambda self, value: str(value).strip())
            moderator = field(query=True)
            admin = field(query=True)

            @admin.transform
            def admin(self, value):
                return getattr(self, "moderator?") and value

        user = User(name="  Ezio Auditore  ", moderator=True)
        user.assign(admin=True)

    When not given, the names are inherited from the base class, or taken from the
    ``attribute_method`` and ``update_method`` settings. An entry point is only installed when
    the class does not already provide something under that name, so a method written in the
    class body or inherited from a base class is never overwritten.
    """

    __attributes__: t.Mapping[str, AttributeField] = types.MappingProxyType({})
    __attribute_method__: t.ClassVar[t.Optional[str]] = _UNSET
    __update_method__: t.ClassVar[t.Optional[str]] = _UNSET

    def __init__(self, attributes=None, /, **kwargs):
        if attributes is not None or kwargs:
            update_attributes(self, attributes, **kwargs)

    def __init_subclass__(cls, **kwargs):
        settings = get_settings()
        cls.__attribute_method__ = _resolve(
            kwargs.pop("attribute_method", cls.__attribute_method__), settings.attribute_method
        )
        cls.__update_method__ = _resolve(
            kwargs.pop("update_method", cls.__update_method__), settings.update_method
        )
        super().__init_subclass__(**kwargs)
        cls.__attributes__ = {
            key: value for key, value in vars(cls).items() if isinstance(value, AttributeField)
        }
        _install(cls, cls.__attribute_method__, classmethod(attribute))
        _install(cls, cls.__update_method__, _update_attributes)

    @classmethod
    def all_attributes(cls) -> t.Dict[str, AttributeField]:
        bases = [c for c in cls.__mro__ if issubclass(c, HasAttributes)]
        return dict(
            itertools.chain.from_iterable(
                vars(b)["__attributes__"].items() for b in reversed(bases)
            )
        )


def attribute(cls, name, /, options=None, transform=None, **kwargs):
    """Define an attribute on this class, see ``define_attribute``. Returns the class"""
    return define_attribute(cls, name, options, transform, **kwargs)


def _update_attributes(self, attributes=None, /, **kwargs):
    """Update attributes on this object, see ``update_attributes``. Returns the object"""
    return update_attributes(self, attributes, **kwargs)


def _resolve(name, default):
    if name is _UNSET:
        return default
    if name and not (isinstance(name, str) and name.isidentifier()):
        raise InvalidArgument(f"Invalid method name {name!r}")
    return name or None


def _install(cls, name, method):
    if name and inspect.getattr_static(cls, name, _MISSING) is _MISSING:
        setattr(cls, name, method)
