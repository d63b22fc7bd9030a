from .conversion import to_identifier, to_mapping
from .logging import get_logger

__all__ = [
    "to_identifier",
    "to_mapping",
    "get_logger",
]
