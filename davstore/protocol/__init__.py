"""
WebDAV protocol pieces for the storage client.

The protocol layer is organized into:
- types: Core data structures (DAVMethod, MultiStatusEntry, ResourceProperties, ...)
- xml_builders: Pure functions to build PROPFIND request bodies
- xml_parsers: Functions to parse 207 Multi-Status response bodies

Example usage:

    from davstore.protocol import parse_multistatus, extract_properties

    entries = parse_multistatus(207, body, "https://dav.example.com/webdav")
    for entry in entries:
        print(entry.path, entry.status, extract_properties(entry.prop))
"""

from .types import (
    # Enums
    DAVMethod,
    ResourceKind,
    # Result types
    DescendantMap,
    MultiStatusEntry,
    ResourceProperties,
)
from .xml_builders import (
    build_content_type_body,
    build_properties_body,
    build_propfind_body,
)
from .xml_parsers import (
    descendant_map,
    extract_properties,
    parse_multistatus,
    resolve_href,
    resource_kind,
)

__all__ = [
    # Enums
    "DAVMethod",
    "ResourceKind",
    # Result types
    "DescendantMap",
    "MultiStatusEntry",
    "ResourceProperties",
    # XML Builders
    "build_content_type_body",
    "build_properties_body",
    "build_propfind_body",
    # XML Parsers
    "descendant_map",
    "extract_properties",
    "parse_multistatus",
    "resolve_href",
    "resource_kind",
]
