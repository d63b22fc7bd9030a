from __future__ import annotations

import copy
import inspect
import logging
import types
import typing as t

from aspect_attributes.exceptions import InvalidArgument
from aspect_attributes.settings import get_settings
from aspect_attributes.types import Options, Reader, Transform
from aspect_attributes.utils.conversion import to_identifier, to_mapping

logger = logging.getLogger(__name__)

DEFAULT_FLAGS = {"getter": True, "setter": True, "query": False}


class AttributeField:
    """Descriptor for a generated attribute. In a class body the attribute name is taken from
    the assignment::

        class User:
            name = field(transform=lambda self, value: str(value).strip())
            admin = field(query=True)

        user = User()
        user.name = "  Ezio Auditore  "
        user.name  # "Ezio Auditore"
        user.admin = "yes"
        getattr(user, "admin?")  # True

    options: ``getter`` (default ``True``) and ``setter`` (default ``True``) determine whether
        the read and write accessors exist. ``query`` (default ``False``) makes this a query
        attribute: the read accessor is named after ``query_name_format`` (``"admin?"``) and
        values are stored and read as ``bool``. Any other option is passed on to the transform.
    transform: called as ``transform(instance, value, options)`` (or
        ``transform(instance, value)``) when the attribute is set, its return value is stored.
    """

    def __init__(
        self,
        name: t.Optional[str] = None,
        transform: t.Optional[Transform] = None,
        options: t.Optional[Options] = None,
        **kwargs,
    ):
        self.name = to_identifier(name) if name is not None else None
        self.options: Options = types.MappingProxyType(
            {**DEFAULT_FLAGS, **to_mapping(options), **kwargs}
        )
        self._transform = transform
        self._transform_takes_options = _accepts_options(transform)
        self._fget: t.Optional[Reader] = None
        self.owner: t.Optional[type] = None
        self.slot_name: t.Optional[str] = None
        self.query_name: t.Optional[str] = None

    @property
    def is_query(self):
        return bool(self.options["query"])

    @property
    def readable(self):
        """Whether ``instance.<name>`` can be read. A query attribute is read through its
        ``query_name`` instead"""
        return bool(self.options["getter"]) and not self.is_query

    @property
    def writable(self):
        return bool(self.options["setter"])

    def __set_name__(self, owner, name):
        if self.name is not None and self.name != name:
            raise InvalidArgument(
                f"Cannot assign attribute '{self.name}' under a different name '{name}'"
            )
        settings = get_settings()
        self.name = name
        self.owner = owner
        self.slot_name = settings.slot_name(name)
        if self.is_query and self.options["getter"]:
            self.query_name = settings.query_name(name)
            setattr(owner, self.query_name, QueryAccessor(self))
        if isinstance(table := vars(owner).get("__attributes__"), dict):
            table[name] = self

    def __get__(self, instance, owner=None):
        if instance is None:
            return self
        if not self.readable:
            raise AttributeError(
                f"'{type(instance).__name__}' object has no attribute '{self.name}'",
                name=self.name,
                obj=instance,
            )
        return self.read(instance)

    def __set__(self, instance, value):
        if not self.writable:
            raise AttributeError(
                f"attribute '{self.name}' of '{type(instance).__name__}' object has no setter"
            )
        if self._transform is not None:
            if self._transform_takes_options:
                value = self._transform(instance, value, self.options)
            else:
                value = self._transform(instance, value)
        if self.is_query:
            value = bool(value)
        self.write(instance, value)

    def read(self, instance):
        if self._fget is not None:
            return self._fget(instance)
        if (member := _slot_member(type(instance), self.slot_name)) is not None:
            try:
                return member.__get__(instance, type(instance))
            except AttributeError:
                return None
        return getattr(instance, "__dict__", {}).get(self.slot_name)

    def write(self, instance, value):
        """Store ``value`` in the slot of ``instance``. The slot is accessed directly, so a class
        attribute that happens to share the slot name is never invoked
        """
        if (member := _slot_member(type(instance), self.slot_name)) is not None:
            member.__set__(instance, value)
        else:
            instance.__dict__[self.slot_name] = value

    def getter(self, fget: Reader) -> AttributeField:
        """Return a copy of this field that reads through ``fget`` and has its read accessor
        enabled. Intended to be used as a decorator, like ``property.getter``
        """
        rv = self._copy(getter=True)
        rv._fget = fget
        return rv

    def transform(self, transform: Transform) -> AttributeField:
        """Return a copy of this field that uses ``transform`` when setting a value. Intended to
        be used as a decorator, like ``property.setter``
        """
        rv = self._copy()
        rv._transform = transform
        rv._transform_takes_options = _accepts_options(transform)
        return rv

    def _copy(self, **options):
        rv = copy.copy(self)
        rv.options = types.MappingProxyType({**self.options, **options})
        return rv

    def uninstall(self, owner):
        """Remove the query accessor that this field generated on ``owner``, if any"""
        accessor = vars(owner).get(self.query_name) if self.query_name else None
        if isinstance(accessor, QueryAccessor) and accessor.field is self:
            delattr(owner, self.query_name)

    def __repr__(self):
        flags = ", ".join(f"{k}={bool(self.options[k])}" for k in DEFAULT_FLAGS)
        return f"{type(self).__name__}({self.name!r}, {flags})"


field = AttributeField


class QueryAccessor:
    """Read accessor of a query attribute, returns the value of the attribute as a ``bool``"""

    writable = False

    def __init__(self, field: AttributeField):
        self.field = field

    def __get__(self, instance, owner=None):
        if instance is None:
            return self
        return bool(self.field.read(instance))

    def __set__(self, instance, value):
        raise AttributeError(f"query accessor '{self.field.query_name}' is read only")


def define_attribute(
    owner: type,
    name,
    /,
    options: t.Optional[Options] = None,
    transform: t.Optional[Transform] = None,
    **kwargs,
):
    """Define an attribute called ``name`` on the class ``owner``. See ``AttributeField`` for the
    available options. An existing attribute with the same name defined on ``owner`` is
    replaced. Returns ``owner``
    """
    name = to_identifier(name)
    attr = AttributeField(name, transform, options, **kwargs)

    previous = vars(owner).get(name)
    if isinstance(previous, AttributeField):
        previous.uninstall(owner)

    setattr(owner, name, attr)
    attr.__set_name__(owner, name)
    logger.debug(
        "Defined attribute '%s' on %s (getter=%s, setter=%s, query=%s)",
        name,
        owner.__name__,
        *(bool(attr.options[k]) for k in DEFAULT_FLAGS),
    )
    return owner


def _accepts_options(func) -> bool:
    if func is None:
        return False
    try:
        params = inspect.signature(func).parameters.values()
    except (TypeError, ValueError):
        return True
    if any(p.kind == p.VAR_POSITIONAL for p in params):
        return True
    positional = [p for p in params if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD)]
    return len(positional) >= 3


def _slot_member(cls, slot_name):
    for klass in cls.__mro__:
        member = vars(klass).get(slot_name)
        if isinstance(member, types.MemberDescriptorType):
            return member
    return None
