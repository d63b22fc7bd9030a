from .core import (
    AttributeField,
    HasAttributes,
    QueryAccessor,
    define_attribute,
    field,
    has_setter,
    update_attributes,
)
from .exceptions import AttributeException, InvalidArgument, UnknownAttribute
from .settings import Settings, get_settings, reset_settings, use_settings

__all__ = [
    "AttributeField",
    "HasAttributes",
    "QueryAccessor",
    "define_attribute",
    "field",
    "has_setter",
    "update_attributes",
    "AttributeException",
    "InvalidArgument",
    "UnknownAttribute",
    "Settings",
    "get_settings",
    "reset_settings",
    "use_settings",
]
