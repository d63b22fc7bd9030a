from .attribute import AttributeField, QueryAccessor, define_attribute, field
from .has_attributes import HasAttributes
from .update import has_setter, update_attributes

__all__ = [
    "AttributeField",
    "QueryAccessor",
    "define_attribute",
    "field",
    "HasAttributes",
    "has_setter",
    "update_attributes",
]
