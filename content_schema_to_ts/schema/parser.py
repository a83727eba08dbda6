"""
Schema dump parser that builds the schema model.

Decodes the JSON form of a content schema (camelCase keys, as written by
the schema loading collaborator) into the dataclass nodes. Only the
structure is decoded; schema correctness is not checked here.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from ..errors import SchemaLoadError
from .nodes import (
    BooleanFieldDef,
    ComputedField,
    DateFieldDef,
    DocumentTypeDef,
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
    NestedTypeDef,
    NestedUnnamedFieldDef,
    NestedUnnamedTypeDef,
    NumberFieldDef,
    ReferenceFieldDef,
    ReferencePolymorphicFieldDef,
    SchemaDef,
    StringFieldDef,
)

logger = logging.getLogger(__name__)


class SchemaParser:
    """Parses a schema dump into a SchemaDef."""

    # Field kinds whose definition carries nothing beyond the common attributes
    SIMPLE_FIELD_TYPES: dict[str, type] = {
        "boolean": BooleanFieldDef,
        "string": StringFieldDef,
        "number": NumberFieldDef,
        "json": JsonFieldDef,
        "date": DateFieldDef,
        "markdown": MarkdownFieldDef,
        "mdx": MdxFieldDef,
    }

    def parse(self, data: dict[str, Any]) -> SchemaDef:
        """
        Parse a schema dump.

        Args:
            data: Dictionary with ``documentTypeDefMap`` and ``nestedTypeDefMap``

        Returns:
            SchemaDef with all document and nested type definitions
        """
        schema_def = SchemaDef()

        for key, raw in (data.get("documentTypeDefMap") or {}).items():
            path = f"documentTypeDefMap.{key}"
            name = raw.get("name", key)
            schema_def.document_type_def_map[name] = DocumentTypeDef(
                name=name,
                field_defs=self._parse_field_defs(raw.get("fieldDefs") or [], path),
                computed_fields=[self._parse_computed_field(c, f"{path}.computedFields[{i}]") for i, c in enumerate(raw.get("computedFields") or [])],
                description=raw.get("description"),
                extensions=raw.get("extensions") or {},
            )

        for key, raw in (data.get("nestedTypeDefMap") or {}).items():
            path = f"nestedTypeDefMap.{key}"
            name = raw.get("name", key)
            schema_def.nested_type_def_map[name] = NestedTypeDef(
                name=name,
                field_defs=self._parse_field_defs(raw.get("fieldDefs") or [], path),
                description=raw.get("description"),
                extensions=raw.get("extensions") or {},
            )

        logger.debug(
            "Parsed schema with %d document types and %d nested types",
            len(schema_def.document_type_def_map),
            len(schema_def.nested_type_def_map),
        )
        return schema_def

    def _parse_field_defs(self, raw_fields: list[dict[str, Any]], path: str) -> list[FieldDef]:
        return [self._parse_field_def(raw, f"{path}.fieldDefs[{i}]") for i, raw in enumerate(raw_fields)]

    def _parse_computed_field(self, raw: dict[str, Any], path: str) -> ComputedField:
        if "name" not in raw or "type" not in raw:
            raise SchemaLoadError(f"{path}: computed field requires 'name' and 'type'")
        return ComputedField(name=raw["name"], type=raw["type"], description=raw.get("description"))

    def _parse_field_def(self, raw: dict[str, Any], path: str) -> FieldDef:
        """
        Parse a single field definition.

        Args:
            raw: The field definition dictionary
            path: Location in the dump (for error messages)

        Returns:
            The FieldDef subclass matching ``raw["type"]``
        """
        field_type = raw.get("type")
        if field_type is None:
            raise SchemaLoadError(f"{path}: field definition has no 'type'")

        common = {
            "name": raw.get("name", ""),
            "is_required": bool(raw.get("isRequired", False)),
            "description": raw.get("description"),
        }

        if field_type in self.SIMPLE_FIELD_TYPES:
            return self.SIMPLE_FIELD_TYPES[field_type](**common)

        if field_type == "nested":
            return NestedFieldDef(**common, nested_type_name=self._require(raw, "nestedTypeName", path))

        if field_type == "nested_polymorphic":
            return NestedPolymorphicFieldDef(**common, nested_type_names=list(self._require(raw, "nestedTypeNames", path)))

        if field_type == "nested_unnamed":
            return NestedUnnamedFieldDef(**common, type_def=self._parse_unnamed_type_def(raw, path))

        if field_type == "reference":
            return ReferenceFieldDef(**common, document_type_name=self._require(raw, "documentTypeName", path))

        if field_type == "reference_polymorphic":
            return ReferencePolymorphicFieldDef(**common, document_type_names=list(self._require(raw, "documentTypeNames", path)))

        if field_type == "list":
            return ListFieldDef(**common, of=self._parse_list_item(self._require(raw, "of", path), f"{path}.of"))

        if field_type == "list_polymorphic":
            items = self._require(raw, "of", path)
            return ListPolymorphicFieldDef(**common, of=[self._parse_list_item(item, f"{path}.of[{i}]") for i, item in enumerate(items)])

        if field_type == "enum":
            return EnumFieldDef(**common, options=list(self._require(raw, "options", path)))

        raise SchemaLoadError(f"{path}: unknown field type '{field_type}'")

    def _parse_list_item(self, raw: dict[str, Any], path: str) -> ListFieldDefItem:
        """Parse the item definition of a list field."""
        item_type = raw.get("type")

        if item_type == "boolean":
            return ListItemBoolean()
        if item_type == "string":
            return ListItemString()
        if item_type == "nested":
            return ListItemNested(nested_type_name=self._require(raw, "nestedTypeName", path))
        if item_type == "enum":
            return ListItemEnum(options=list(self._require(raw, "options", path)))
        if item_type == "nested_unnamed":
            return ListItemNestedUnnamed(type_def=self._parse_unnamed_type_def(raw, path))
        if item_type == "reference":
            return ListItemReference(document_type_name=self._require(raw, "documentTypeName", path))

        raise SchemaLoadError(f"{path}: unsupported list item type '{item_type}'")

    def _parse_unnamed_type_def(self, raw: dict[str, Any], path: str) -> NestedUnnamedTypeDef:
        type_def = self._require(raw, "typeDef", path)
        return NestedUnnamedTypeDef(field_defs=self._parse_field_defs(type_def.get("fieldDefs") or [], f"{path}.typeDef"))

    def _require(self, raw: dict[str, Any], key: str, path: str) -> Any:
        if key not in raw:
            raise SchemaLoadError(f"{path}: missing '{key}'")
        return raw[key]


def load_schema(path: str | Path) -> SchemaDef:
    """Read a schema dump from a JSON file."""
    with open(path, encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise SchemaLoadError(f"{path}: invalid JSON: {e}") from e
    if not isinstance(data, dict):
        raise SchemaLoadError(f"{path}: expected a JSON object at the top level")
    return SchemaParser().parse(data)
