"""
Configuration for type declaration generation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class SourcePluginType(str, Enum):
    """Content source adapter that supplied the schema."""

    LOCAL = "local"
    CONTENTFUL = "contentful"
    SANITY = "sanity"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: str | SourcePluginType | None) -> SourcePluginType:
        """Map an adapter name to a member, falling back to UNKNOWN."""
        if isinstance(value, SourcePluginType):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN


@dataclass
class FieldOptions:
    """Field naming options."""

    # Field holding the type discriminant
    type_field_name: str = "type"

    @staticmethod
    def from_dict(d: dict) -> FieldOptions:
        options = FieldOptions()
        options.type_field_name = d.get("type_field_name", d.get("typeFieldName", options.type_field_name))
        return options

    def to_dict(self) -> dict:
        return {
            "type_field_name": self.type_field_name,
        }


@dataclass
class GenerationOptions:
    """Configuration options for type declaration generation."""

    source_plugin_type: SourcePluginType = SourcePluginType.UNKNOWN

    field_options: FieldOptions = field(default_factory=FieldOptions)

    # Add the do-not-edit banner at the top of the module
    add_generation_comment: bool = True

    @staticmethod
    def from_dict(d: dict) -> GenerationOptions:
        """Create options from a dictionary.

        Accepts snake_case keys as well as the camelCase names used by
        schema dumps. Unknown keys are ignored.
        """
        options = GenerationOptions()
        plugin_type = d.get("source_plugin_type", d.get("sourcePluginType"))
        if plugin_type is not None:
            options.source_plugin_type = SourcePluginType.parse(plugin_type)
        field_options = d.get("field_options", d.get("fieldOptions"))
        if field_options is not None:
            options.field_options = FieldOptions.from_dict(field_options)
        if "add_generation_comment" in d:
            options.add_generation_comment = bool(d["add_generation_comment"])
        return options

    def to_dict(self) -> dict:
        """Convert options to a dictionary."""
        return {
            "source_plugin_type": self.source_plugin_type.value,
            "field_options": self.field_options.to_dict(),
            "add_generation_comment": self.add_generation_comment,
        }
