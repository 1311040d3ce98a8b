"""Server-side helpers exposed by the Persian date package."""

from . import converter, fields

__all__ = [
    "converter",
    "fields",
]
