"""
Schema model node definitions.

These nodes represent a content schema as handed over by the schema
loading collaborator: document types, nested types and their field
definitions. The renderer only reads them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar


@dataclass
class FieldDefBase:
    """Attributes shared by every field definition."""

    # Discriminant, fixed per subclass
    type: ClassVar[str] = ""

    name: str = ""
    is_required: bool = False
    description: str | None = None


@dataclass
class BooleanFieldDef(FieldDefBase):
    type: ClassVar[str] = "boolean"


@dataclass
class StringFieldDef(FieldDefBase):
    type: ClassVar[str] = "string"


@dataclass
class NumberFieldDef(FieldDefBase):
    type: ClassVar[str] = "number"


@dataclass
class JsonFieldDef(FieldDefBase):
    type: ClassVar[str] = "json"


@dataclass
class DateFieldDef(FieldDefBase):
    type: ClassVar[str] = "date"


@dataclass
class MarkdownFieldDef(FieldDefBase):
    type: ClassVar[str] = "markdown"


@dataclass
class MdxFieldDef(FieldDefBase):
    type: ClassVar[str] = "mdx"


@dataclass
class NestedFieldDef(FieldDefBase):
    """Reference to a single named nested type."""

    type: ClassVar[str] = "nested"

    nested_type_name: str = ""


@dataclass
class NestedPolymorphicFieldDef(FieldDefBase):
    """Value may be any one of several named nested types."""

    type: ClassVar[str] = "nested_polymorphic"

    nested_type_names: list[str] = field(default_factory=list)


@dataclass
class NestedUnnamedFieldDef(FieldDefBase):
    """Inline anonymous shape, never registered as a named type."""

    type: ClassVar[str] = "nested_unnamed"

    type_def: NestedUnnamedTypeDef = field(default_factory=lambda: NestedUnnamedTypeDef())


@dataclass
class ReferenceFieldDef(FieldDefBase):
    type: ClassVar[str] = "reference"

    document_type_name: str = ""


@dataclass
class ReferencePolymorphicFieldDef(FieldDefBase):
    type: ClassVar[str] = "reference_polymorphic"

    document_type_names: list[str] = field(default_factory=list)


@dataclass
class ListFieldDef(FieldDefBase):
    """Homogeneous sequence of one item kind."""

    type: ClassVar[str] = "list"

    of: ListFieldDefItem = field(default_factory=lambda: ListItemString())


@dataclass
class ListPolymorphicFieldDef(FieldDefBase):
    """Sequence whose items may be any of several kinds."""

    type: ClassVar[str] = "list_polymorphic"

    of: list[ListFieldDefItem] = field(default_factory=list)


@dataclass
class EnumFieldDef(FieldDefBase):
    type: ClassVar[str] = "enum"

    options: list[str] = field(default_factory=list)


FieldDef = (
    BooleanFieldDef
    | StringFieldDef
    | NumberFieldDef
    | JsonFieldDef
    | DateFieldDef
    | MarkdownFieldDef
    | MdxFieldDef
    | NestedFieldDef
    | NestedPolymorphicFieldDef
    | NestedUnnamedFieldDef
    | ReferenceFieldDef
    | ReferencePolymorphicFieldDef
    | ListFieldDef
    | ListPolymorphicFieldDef
    | EnumFieldDef
)


# List items: the subset of field kinds valid as list members


@dataclass
class ListItemBoolean:
    type: ClassVar[str] = "boolean"


@dataclass
class ListItemString:
    type: ClassVar[str] = "string"


@dataclass
class ListItemNested:
    type: ClassVar[str] = "nested"

    nested_type_name: str = ""


@dataclass
class ListItemEnum:
    type: ClassVar[str] = "enum"

    options: list[str] = field(default_factory=list)


@dataclass
class ListItemNestedUnnamed:
    type: ClassVar[str] = "nested_unnamed"

    type_def: NestedUnnamedTypeDef = field(default_factory=lambda: NestedUnnamedTypeDef())


@dataclass
class ListItemReference:
    type: ClassVar[str] = "reference"

    document_type_name: str = ""


ListFieldDefItem = ListItemBoolean | ListItemString | ListItemNested | ListItemEnum | ListItemNestedUnnamed | ListItemReference


@dataclass
class NestedUnnamedTypeDef:
    """Field list of an inline anonymous shape."""

    field_defs: list[FieldDef] = field(default_factory=list)


@dataclass
class ComputedField:
    """A document field whose type expression is supplied pre-rendered."""

    name: str = ""
    type: str = ""
    description: str | None = None


@dataclass
class DocumentTypeDef:
    """A top-level content shape with an identity and a raw payload."""

    name: str = ""
    field_defs: list[FieldDef] = field(default_factory=list)
    computed_fields: list[ComputedField] = field(default_factory=list)
    description: str | None = None

    # Adapter specific metadata (e.g. {"stackbit": {"fields": {...}}})
    extensions: dict[str, Any] = field(default_factory=dict)


@dataclass
class NestedTypeDef:
    """A named, reusable sub-shape."""

    name: str = ""
    field_defs: list[FieldDef] = field(default_factory=list)
    description: str | None = None
    extensions: dict[str, Any] = field(default_factory=dict)


@dataclass
class SchemaDef:
    """Root of the schema model."""

    document_type_def_map: dict[str, DocumentTypeDef] = field(default_factory=dict)
    nested_type_def_map: dict[str, NestedTypeDef] = field(default_factory=dict)
