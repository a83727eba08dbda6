"""
Tests for type declaration rendering.
"""

from __future__ import annotations

import pytest

from content_schema_to_ts.config import FieldOptions, GenerationOptions, SourcePluginType
from content_schema_to_ts.errors import ReservedFieldNameError
from content_schema_to_ts.generation.type_defs import render_type
from content_schema_to_ts.schema.nodes import (
    ComputedField,
    DocumentTypeDef,
    EnumFieldDef,
    ListFieldDef,
    ListItemString,
    NestedTypeDef,
    StringFieldDef,
)


def local_options(**kwargs) -> GenerationOptions:
    return GenerationOptions(source_plugin_type=SourcePluginType.LOCAL, **kwargs)


def post_type_def() -> DocumentTypeDef:
    return DocumentTypeDef(
        name="Post",
        description="A blog post",
        field_defs=[
            StringFieldDef(name="title", is_required=True, description="The title of the post"),
            ListFieldDef(name="tags", of=ListItemString()),
        ],
        computed_fields=[ComputedField(name="url", type="string", description="Permalink")],
    )


class TestRenderDocumentType:
    def test_full_layout(self):
        expected = (
            "/** A blog post */\n"
            "export type Post = {\n"
            "  /** File path relative to `contentDirPath` */\n"
            "  _id: string\n"
            "  _raw: Local.RawDocumentData\n"
            "  type: 'Post'\n"
            "  /** The title of the post */\n"
            "  title: string\n"
            "  tags: string[] | undefined\n"
            "  /** Permalink */\n"
            "  url: string\n"
            "}"
        )
        assert render_type(post_type_def(), local_options()) == expected

    def test_no_fields(self):
        expected = "export type Empty = {\n  /** ID */\n  _id: string\n  _raw: Record<string, any>\n  type: 'Empty'\n}"
        assert render_type(DocumentTypeDef(name="Empty"), GenerationOptions()) == expected

    def test_type_field_emitted_once(self):
        type_def = DocumentTypeDef(
            name="Page",
            field_defs=[
                StringFieldDef(name="type", is_required=True),
                StringFieldDef(name="title", is_required=True),
            ],
        )
        out = render_type(type_def, local_options())
        assert out.count("type:") == 1
        assert "  type: 'Page'\n  title: string\n" in out

    def test_custom_type_field_name(self):
        options = local_options(field_options=FieldOptions(type_field_name="kind"))
        type_def = DocumentTypeDef(name="Page", field_defs=[EnumFieldDef(name="kind", is_required=True, options=["a"])])
        out = render_type(type_def, options)
        assert "  kind: 'Page'\n" in out
        assert "'a'" not in out

    def test_fixed_fields_come_first(self):
        type_def = DocumentTypeDef(name="Page", field_defs=[StringFieldDef(name="a", is_required=True)])
        lines = render_type(type_def, local_options()).splitlines()
        assert lines[1:6] == [
            "  /** File path relative to `contentDirPath` */",
            "  _id: string",
            "  _raw: Local.RawDocumentData",
            "  type: 'Page'",
            "  a: string",
        ]

    def test_computed_fields_after_declared_fields(self):
        type_def = DocumentTypeDef(
            name="Doc",
            field_defs=[StringFieldDef(name="title", is_required=True)],
            computed_fields=[ComputedField(name="slug", type="string"), ComputedField(name="words", type="number")],
        )
        out = render_type(type_def, local_options())
        assert out.endswith("  title: string\n  slug: string\n  words: number\n}")

    def test_computed_field_named_like_type_field_raises(self):
        type_def = DocumentTypeDef(name="Doc", computed_fields=[ComputedField(name="type", type="string")])
        with pytest.raises(ReservedFieldNameError, match="Doc"):
            render_type(type_def, local_options())

    def test_label_from_extensions(self):
        type_def = DocumentTypeDef(name="Post", extensions={"stackbit": {"fields": {"Post": {"label": "Blog Post"}}}})
        assert render_type(type_def, local_options()).startswith("/** Blog Post */\nexport type Post = {")

    def test_description_wins_over_label(self):
        type_def = DocumentTypeDef(
            name="Post",
            description="Declared",
            extensions={"stackbit": {"fields": {"Post": {"label": "Blog Post"}}}},
        )
        assert render_type(type_def, local_options()).startswith("/** Declared */\n")


class TestRenderNestedType:
    def test_nested_layout(self):
        type_def = NestedTypeDef(name="Author", field_defs=[StringFieldDef(name="name", is_required=True)])
        expected = "export type Author = {\n  /** Contentful object id */\n  _id: string\n  _raw: Contentful.RawDocumentData\n  type: 'Author'\n  name: string\n}"
        assert render_type(type_def, GenerationOptions(source_plugin_type=SourcePluginType.CONTENTFUL)) == expected

    def test_nested_ignores_extension_label(self):
        type_def = NestedTypeDef(name="Author", extensions={"stackbit": {"fields": {"Author": {"label": "Writer"}}}})
        assert "Writer" not in render_type(type_def, local_options())


class TestSourceAdapters:
    @pytest.mark.parametrize(
        "plugin_type, id_doc, raw_type",
        [
            (SourcePluginType.LOCAL, "File path relative to `contentDirPath`", "Local.RawDocumentData"),
            (SourcePluginType.CONTENTFUL, "Contentful object id", "Contentful.RawDocumentData"),
            (SourcePluginType.SANITY, "Sanity object id", "Record<string, any>"),
            (SourcePluginType.UNKNOWN, "ID", "Record<string, any>"),
        ],
    )
    def test_adapter_specific_lines(self, plugin_type, id_doc, raw_type):
        out = render_type(DocumentTypeDef(name="Post"), GenerationOptions(source_plugin_type=plugin_type))
        assert f"  /** {id_doc} */\n  _id: string\n  _raw: {raw_type}\n" in out
