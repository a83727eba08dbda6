"""
Field type rendering.

Maps a single field definition to a TypeScript type expression. Nested,
list and polymorphic kinds are rendered recursively.
"""

from __future__ import annotations

from typing import Never, NoReturn

from ..errors import UnhandledFieldKindError
from ..schema.nodes import (
    BooleanFieldDef,
    DateFieldDef,
    EnumFieldDef,
    FieldDef,
    JsonFieldDef,
    ListFieldDef,
    ListFieldDefItem,
    ListItemBoolean,
    ListItemEnum,
    ListItemNested,
    ListItemNestedUnnamed,
    ListItemReference,
    ListItemString,
    ListPolymorphicFieldDef,
    MarkdownFieldDef,
    MdxFieldDef,
    NestedFieldDef,
    NestedPolymorphicFieldDef,
    NestedUnnamedFieldDef,
    NestedUnnamedTypeDef,
    NumberFieldDef,
    ReferenceFieldDef,
    ReferencePolymorphicFieldDef,
    StringFieldDef,
)

INDENT = "  "

# Appended to the type of fields that are not required
UNDEFINED_MARKER = " | undefined"


def cases_handled(value: Never) -> NoReturn:
    """Fail on a variant that the dispatch above it does not handle.

    Typed as ``Never`` so that a type checker reports any variant that can
    still reach this call.
    """
    kind = getattr(value, "type", type(value).__name__)
    raise UnhandledFieldKindError(f"Unhandled field kind '{kind}' ({type(value).__name__})")


def render_union(type_names: list[str]) -> str:
    return " | ".join(type_names)


def wrap_in_parenthesis(text: str) -> str:
    return f"({text})"


def wrap_in_quotes(text: str) -> str:
    """Render a single quoted string literal."""
    escaped = text.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def render_doc_comment(description: str | None, indent: str = "") -> str:
    """Render a one line ``/** ... */`` comment followed by a newline, or nothing."""
    if not description:
        return ""
    return f"{indent}/** {description} */\n"


def render_field_def(field: FieldDef) -> str:
    """
    Render one field as a line of a type body.

    Args:
        field: The field definition

    Returns:
        ``  name: type`` preceded by its documentation line when present
    """
    optional = "" if field.is_required else UNDEFINED_MARKER
    return f"{render_doc_comment(field.description, INDENT)}{INDENT}{field.name}: {render_field_type(field)}{optional}"


def render_field_type(field: FieldDef) -> str:
    """Render the type expression of a field, without the optional marker."""
    if isinstance(field, (BooleanFieldDef, StringFieldDef, NumberFieldDef)):
        return field.type
    if isinstance(field, JsonFieldDef):
        return "any"
    if isinstance(field, DateFieldDef):
        # Dates are delivered as ISO strings
        return "string"
    if isinstance(field, MarkdownFieldDef):
        return "Markdown"
    if isinstance(field, MdxFieldDef):
        return "MDX"
    if isinstance(field, NestedFieldDef):
        return field.nested_type_name
    if isinstance(field, NestedPolymorphicFieldDef):
        return render_union(field.nested_type_names)
    if isinstance(field, NestedUnnamedFieldDef):
        return render_unnamed_type(field.type_def)
    if isinstance(field, (ReferenceFieldDef, ReferencePolymorphicFieldDef)):
        # Only the id of the referenced document is kept
        return "string"
    if isinstance(field, ListFieldDef):
        return render_list_item_field_type(field.of) + "[]"
    if isinstance(field, ListPolymorphicFieldDef):
        return render_polymorphic_list_type([render_list_item_field_type(item) for item in field.of])
    if isinstance(field, EnumFieldDef):
        return render_union([wrap_in_quotes(option) for option in field.options])
    cases_handled(field)


def render_list_item_field_type(item: ListFieldDefItem) -> str:
    """Render the type expression of a single list item."""
    if isinstance(item, (ListItemBoolean, ListItemString)):
        return item.type
    if isinstance(item, ListItemNested):
        return item.nested_type_name
    if isinstance(item, ListItemEnum):
        return wrap_in_parenthesis(render_union([wrap_in_quotes(option) for option in item.options]))
    if isinstance(item, ListItemNestedUnnamed):
        return render_unnamed_type(item.type_def)
    if isinstance(item, ListItemReference):
        return "string"
    cases_handled(item)


def render_polymorphic_list_type(type_names: list[str]) -> str:
    return wrap_in_parenthesis(render_union(type_names)) + "[]"


def render_unnamed_type(type_def: NestedUnnamedTypeDef) -> str:
    """Render an inline object type, one field per line."""
    body = "\n".join(render_field_def(field) for field in type_def.field_defs)
    return "{\n" + body + "\n}"
