"""
Exceptions raised while loading schemas and rendering type declarations.
"""

from __future__ import annotations


class TypeGenerationError(Exception):
    """Base class for errors raised by the type declaration renderer."""

    pass


class UnhandledFieldKindError(TypeGenerationError):
    """Raised when a field or list item kind is outside the supported set.

    This signals a mismatch between the schema model and the renderer's
    mapping tables, not a problem with user content.
    """

    pass


class ReservedFieldNameError(TypeGenerationError):
    """Raised when a computed field uses the reserved type field name."""

    pass


class SchemaLoadError(Exception):
    """Raised when a schema dump cannot be decoded into the schema model.

    This can happen when:
    - A field definition has no ``type`` key
    - A field or list item kind is unknown
    - A required key (e.g. ``nestedTypeName``) is missing
    """

    pass
