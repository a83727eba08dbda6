"""
Module rendering.

Assembles every document and nested type declaration, plus the aggregate
lookup and union types, into one self-contained declarations module.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..config import GenerationOptions
from ..schema.nodes import DocumentTypeDef, NestedTypeDef, SchemaDef
from .adapters import get_source_adapter
from .field_types import render_union, wrap_in_quotes
from .templates import get_template
from .type_defs import render_type

logger = logging.getLogger(__name__)

GENERATION_COMMENT = "NOTE This file is auto-generated by content_schema_to_ts. Do not edit it manually."

# Rendered in place of a union with no members
EMPTY_UNION = "never"


@dataclass(frozen=True)
class RenderedType:
    """A type name and its rendered declaration."""

    type_name: str
    declaration: str


def render_union_or_never(type_names: list[str]) -> str:
    return render_union(type_names) if type_names else EMPTY_UNION


class TypesGenerator:
    """Renders the declarations module for a schema."""

    def __init__(self, schema_def: SchemaDef, generation_options: GenerationOptions | None = None):
        """
        Initialize the generator.

        Args:
            schema_def: The schema to render
            generation_options: Adapter and field naming options
        """
        self.schema_def = schema_def
        self.generation_options = generation_options or GenerationOptions()

    def generate(self) -> str:
        """Render the complete module text."""
        document_types = self._render_types(self.schema_def.document_type_def_map.values())
        nested_types = self._render_types(self.schema_def.nested_type_def_map.values())

        document_type_names = [t.type_name for t in document_types]
        nested_type_names = [t.type_name for t in nested_types]

        adapter = get_source_adapter(self.generation_options.source_plugin_type)
        logger.debug(
            "Rendering %d document types and %d nested types for source '%s'",
            len(document_types),
            len(nested_types),
            self.generation_options.source_plugin_type.value,
        )

        return get_template("module.d.ts.jinja2").render(
            generation_comment=GENERATION_COMMENT if self.generation_options.add_generation_comment else None,
            adapter_import=adapter.import_line,
            document_type_names=document_type_names,
            nested_type_names=nested_type_names,
            document_types_union=render_union_or_never(document_type_names),
            document_type_names_union=render_union_or_never([wrap_in_quotes(name) for name in document_type_names]),
            nested_types_union=render_union_or_never(nested_type_names),
            nested_type_names_union=render_union_or_never([wrap_in_quotes(name) for name in nested_type_names]),
            document_type_declarations="\n\n".join(t.declaration for t in document_types),
            nested_type_declarations="\n\n".join(t.declaration for t in nested_types),
        )

    def _render_types(self, type_defs) -> list[RenderedType]:
        """Render type definitions in ascending name order."""
        ordered: list[DocumentTypeDef | NestedTypeDef] = sorted(type_defs, key=lambda type_def: type_def.name)
        return [RenderedType(type_name=type_def.name, declaration=render_type(type_def, self.generation_options)) for type_def in ordered]


def render_types(schema_def: SchemaDef, generation_options: GenerationOptions | None = None) -> str:
    """Render the declarations module for a schema."""
    return TypesGenerator(schema_def, generation_options).generate()
