"""
Per source adapter rendering details.

Each adapter decides the wording of the ``_id`` documentation, the type of
the ``_raw`` payload and the import that brings that type into scope.
Supporting a new adapter means adding one entry to SOURCE_ADAPTERS.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..config import SourcePluginType

# Raw payload type for adapters that don't contribute their own
OPEN_RAW_TYPE = "Record<string, any>"


@dataclass(frozen=True)
class SourceAdapter:
    """Rendering details contributed by one source adapter."""

    id_jsdoc: str
    raw_type: str
    import_line: str | None = None


SOURCE_ADAPTERS: dict[SourcePluginType, SourceAdapter] = {
    SourcePluginType.LOCAL: SourceAdapter(
        id_jsdoc="File path relative to `contentDirPath`",
        raw_type="Local.RawDocumentData",
        import_line="import * as Local from 'contentlayer/source-files'",
    ),
    SourcePluginType.CONTENTFUL: SourceAdapter(
        id_jsdoc="Contentful object id",
        raw_type="Contentful.RawDocumentData",
        import_line="import * as Contentful from '@contentlayer/source-contentful'",
    ),
    SourcePluginType.SANITY: SourceAdapter(
        id_jsdoc="Sanity object id",
        raw_type=OPEN_RAW_TYPE,
    ),
    SourcePluginType.UNKNOWN: SourceAdapter(
        id_jsdoc="ID",
        raw_type=OPEN_RAW_TYPE,
    ),
}


def get_source_adapter(source_plugin_type: SourcePluginType) -> SourceAdapter:
    """Return the adapter entry, using the generic one for unlisted adapters."""
    return SOURCE_ADAPTERS.get(source_plugin_type, SOURCE_ADAPTERS[SourcePluginType.UNKNOWN])
