"""
Type declaration rendering.

Renders one document or nested type definition into an
``export type Name = { ... }`` block.
"""

from __future__ import annotations

from typing import Any

from ..config import GenerationOptions
from ..errors import ReservedFieldNameError
from ..schema.nodes import DocumentTypeDef, NestedTypeDef
from .adapters import get_source_adapter
from .field_types import INDENT, render_doc_comment, render_field_def
from .templates import get_template


def render_type(type_def: DocumentTypeDef | NestedTypeDef, generation_options: GenerationOptions) -> str:
    """
    Render a document or nested type declaration.

    ``_id``, ``_raw`` and the type field always come first, followed by
    the declared fields and, for document types, the computed fields.

    Args:
        type_def: The type definition
        generation_options: Adapter and field naming options

    Returns:
        The declaration block, without a trailing newline
    """
    type_field_name = generation_options.field_options.type_field_name
    adapter = get_source_adapter(generation_options.source_plugin_type)

    # The type field is emitted once, as a literal, above the declared fields
    field_lines = [render_field_def(field) for field in type_def.field_defs if field.name != type_field_name]

    if isinstance(type_def, DocumentTypeDef):
        for computed in type_def.computed_fields:
            if computed.name == type_field_name:
                raise ReservedFieldNameError(f"Computed field '{computed.name}' of '{type_def.name}' collides with the type field name")
            field_lines.append(f"{render_doc_comment(computed.description, INDENT)}{INDENT}{computed.name}: {computed.type}")

    return get_template("type.d.ts.jinja2").render(
        description=_type_description(type_def),
        type_name=type_def.name,
        id_jsdoc=adapter.id_jsdoc,
        raw_type=adapter.raw_type,
        type_field_name=type_field_name,
        field_lines=field_lines,
    )


def _type_description(type_def: DocumentTypeDef | NestedTypeDef) -> str | None:
    """Use the declared description, or the adapter label for document types."""
    if type_def.description:
        return type_def.description
    if isinstance(type_def, DocumentTypeDef):
        return _extension_label(type_def.extensions, type_def.name)
    return None


def _extension_label(extensions: dict[str, Any], type_name: str) -> str | None:
    # extensions.stackbit.fields[<type name>].label
    fields = (extensions.get("stackbit") or {}).get("fields") or {}
    return (fields.get(type_name) or {}).get("label")
