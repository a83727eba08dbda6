"""
Tests for field type rendering.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

import pytest

from content_schema_to_ts.errors import UnhandledFieldKindError
from content_schema_to_ts.generation.field_types import render_field_def, render_field_type, render_list_item_field_type
from content_schema_to_ts.schema.nodes import (
    BooleanFieldDef,
    DateFieldDef,
    EnumFieldDef,
    FieldDefBase,
    JsonFieldDef,
    ListFieldDef,
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


@dataclass
class ImageFieldDef(FieldDefBase):
    """A kind the renderer does not know about."""

    type: ClassVar[str] = "image"


@dataclass
class ListItemNumber:
    type: ClassVar[str] = "number"


class TestRenderFieldType:
    """Each field kind maps to its type expression."""

    @pytest.mark.parametrize(
        "field, expected",
        [
            (BooleanFieldDef(name="draft"), "boolean"),
            (StringFieldDef(name="title"), "string"),
            (NumberFieldDef(name="rating"), "number"),
            (JsonFieldDef(name="meta"), "any"),
            (DateFieldDef(name="date"), "string"),
            (MarkdownFieldDef(name="body"), "Markdown"),
            (MdxFieldDef(name="body"), "MDX"),
            (NestedFieldDef(name="author", nested_type_name="Author"), "Author"),
            (NestedPolymorphicFieldDef(name="block", nested_type_names=["Hero", "Cta"]), "Hero | Cta"),
            (ReferenceFieldDef(name="related", document_type_name="Post"), "string"),
            (ReferencePolymorphicFieldDef(name="related", document_type_names=["Post", "Page"]), "string"),
            (ListFieldDef(name="tags", of=ListItemString()), "string[]"),
            (EnumFieldDef(name="status", options=["draft", "published"]), "'draft' | 'published'"),
        ],
        ids=lambda value: value.type if isinstance(value, FieldDefBase) else None,
    )
    def test_field_kind_mapping(self, field, expected):
        assert render_field_type(field) == expected

    def test_enum_keeps_declared_order(self):
        field = EnumFieldDef(name="size", options=["md", "xl", "sm"])
        assert render_field_type(field) == "'md' | 'xl' | 'sm'"

    def test_enum_escapes_quotes(self):
        field = EnumFieldDef(name="label", options=["it's"])
        assert render_field_type(field) == "'it\\'s'"

    def test_list_polymorphic_parenthesizes_union(self):
        field = ListPolymorphicFieldDef(name="items", of=[ListItemString(), ListItemEnum(options=["x", "y"])])
        assert render_field_type(field) == "(string | ('x' | 'y'))[]"

    def test_list_of_nested(self):
        field = ListFieldDef(name="authors", of=ListItemNested(nested_type_name="Author"))
        assert render_field_type(field) == "Author[]"

    def test_list_of_enum(self):
        field = ListFieldDef(name="sizes", of=ListItemEnum(options=["sm", "lg"]))
        assert render_field_type(field) == "('sm' | 'lg')[]"

    def test_nested_unnamed_renders_inline_object(self):
        field = NestedUnnamedFieldDef(
            name="seo",
            is_required=True,
            type_def=NestedUnnamedTypeDef(
                field_defs=[
                    StringFieldDef(name="title", is_required=True),
                    StringFieldDef(name="image", description="Social image"),
                ]
            ),
        )
        assert render_field_type(field) == "{\n  title: string\n  /** Social image */\n  image: string | undefined\n}"

    def test_unknown_kind_raises(self):
        with pytest.raises(UnhandledFieldKindError, match="image"):
            render_field_type(ImageFieldDef(name="cover"))


class TestRenderListItemFieldType:
    """List items cover a subset of field kinds."""

    def test_primitive_items(self):
        assert render_list_item_field_type(ListItemBoolean()) == "boolean"
        assert render_list_item_field_type(ListItemString()) == "string"

    def test_reference_item(self):
        assert render_list_item_field_type(ListItemReference(document_type_name="Post")) == "string"

    def test_enum_item_is_parenthesized(self):
        assert render_list_item_field_type(ListItemEnum(options=["a", "b"])) == "('a' | 'b')"

    def test_nested_unnamed_item(self):
        item = ListItemNestedUnnamed(type_def=NestedUnnamedTypeDef(field_defs=[NumberFieldDef(name="x", is_required=True)]))
        assert render_list_item_field_type(item) == "{\n  x: number\n}"

    def test_unsupported_item_raises(self):
        with pytest.raises(UnhandledFieldKindError, match="number"):
            render_list_item_field_type(ListItemNumber())


class TestRenderFieldDef:
    """Field lines, documentation and the optional marker."""

    def test_required_enum_has_no_marker(self):
        field = EnumFieldDef(name="status", is_required=True, options=["a", "b"])
        assert render_field_def(field) == "  status: 'a' | 'b'"

    def test_optional_enum_has_marker(self):
        field = EnumFieldDef(name="status", is_required=False, options=["a", "b"])
        assert render_field_def(field) == "  status: 'a' | 'b' | undefined"

    def test_optional_list(self):
        field = ListFieldDef(name="tags", of=ListItemString())
        assert render_field_def(field) == "  tags: string[] | undefined"

    def test_description_line(self):
        field = StringFieldDef(name="title", is_required=True, description="The title of the post")
        assert render_field_def(field) == "  /** The title of the post */\n  title: string"
