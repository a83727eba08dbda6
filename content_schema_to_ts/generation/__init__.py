"""
TypeScript declaration rendering.

1. Field types (field_types): one field definition to a type expression
2. Type declarations (type_defs): one document or nested type to a block
3. Module (module): all declarations plus aggregate union and map types
"""

from __future__ import annotations

from .adapters import SOURCE_ADAPTERS, SourceAdapter, get_source_adapter
from .field_types import render_field_def, render_field_type, render_list_item_field_type
from .module import GENERATION_COMMENT, TypesGenerator, render_types
from .type_defs import render_type

__all__ = [
    "TypesGenerator",
    "render_types",
    "render_type",
    "render_field_def",
    "render_field_type",
    "render_list_item_field_type",
    "SourceAdapter",
    "SOURCE_ADAPTERS",
    "get_source_adapter",
    "GENERATION_COMMENT",
]
