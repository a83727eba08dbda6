"""Content Schema to TypeScript Types

A Python package for generating TypeScript type declarations from
content schemas (document types, nested types and their fields).
"""

__version__ = "0.1.0"

from .config import FieldOptions, GenerationOptions, SourcePluginType
from .errors import ReservedFieldNameError, SchemaLoadError, TypeGenerationError, UnhandledFieldKindError
from .generation import TypesGenerator, render_field_type, render_type, render_types
from .schema import SchemaDef, SchemaParser, load_schema
from .writer import AtomicWriter

__all__ = [
    "TypesGenerator",
    "render_types",
    "render_type",
    "render_field_type",
    "GenerationOptions",
    "FieldOptions",
    "SourcePluginType",
    "SchemaDef",
    "SchemaParser",
    "load_schema",
    "AtomicWriter",
    "TypeGenerationError",
    "UnhandledFieldKindError",
    "ReservedFieldNameError",
    "SchemaLoadError",
]
