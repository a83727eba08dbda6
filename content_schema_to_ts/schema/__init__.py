"""
Schema model and the parser that builds it from a schema dump.
"""

from __future__ import annotations

from .nodes import (
    BooleanFieldDef,
    ComputedField,
    DateFieldDef,
    DocumentTypeDef,
    EnumFieldDef,
    FieldDef,
    FieldDefBase,
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
    NestedTypeDef,
    NestedUnnamedFieldDef,
    NestedUnnamedTypeDef,
    NumberFieldDef,
    ReferenceFieldDef,
    ReferencePolymorphicFieldDef,
    SchemaDef,
    StringFieldDef,
)
from .parser import SchemaParser, load_schema

__all__ = [
    "SchemaDef",
    "DocumentTypeDef",
    "NestedTypeDef",
    "NestedUnnamedTypeDef",
    "ComputedField",
    "FieldDef",
    "FieldDefBase",
    "BooleanFieldDef",
    "StringFieldDef",
    "NumberFieldDef",
    "JsonFieldDef",
    "DateFieldDef",
    "MarkdownFieldDef",
    "MdxFieldDef",
    "NestedFieldDef",
    "NestedPolymorphicFieldDef",
    "NestedUnnamedFieldDef",
    "ReferenceFieldDef",
    "ReferencePolymorphicFieldDef",
    "ListFieldDef",
    "ListPolymorphicFieldDef",
    "EnumFieldDef",
    "ListFieldDefItem",
    "ListItemBoolean",
    "ListItemString",
    "ListItemNested",
    "ListItemEnum",
    "ListItemNestedUnnamed",
    "ListItemReference",
    "SchemaParser",
    "load_schema",
]
