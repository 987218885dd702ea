"""
Pure functions for building WebDAV XML request bodies.

All functions in this module are pure - they take data in and return XML out,
with no side effects or I/O.
"""
from typing import List
from typing import Optional

from lxml import etree

from davstore.elements import dav
from davstore.elements.base import BaseElement

LIVE_PROPERTIES = (
    dav.CreationDate,
    dav.GetContentLength,
    dav.GetLastModified,
    dav.GetContentType,
)


def build_propfind_body(
    props: Optional[List[str]] = None,
    propname: bool = False,
) -> bytes:
    """
    Build PROPFIND request body XML.

    Args:
        props: List of property names (local names in the DAV: namespace)
               to retrieve.
        propname: If True, ask for the property names only.  This is
               the cheapest PROPFIND there is, used when only the
               number of resources matters.

    Returns:
        UTF-8 encoded XML bytes
    """
    if propname:
        propfind = dav.Propfind() + dav.PropName()
    elif props:
        prop_elements = []
        for prop_name in props:
            prop_element = _prop_name_to_element(prop_name)
            if prop_element is not None:
                prop_elements.append(prop_element)
        propfind = dav.Propfind() + (dav.Prop() + prop_elements)
    else:
        propfind = dav.Propfind() + dav.Prop()

    return etree.tostring(propfind.xmlelement(), encoding="utf-8", xml_declaration=True)


def build_properties_body() -> bytes:
    """PROPFIND body for the properties making up a ResourceProperties"""
    return build_propfind_body(
        ["creationdate", "getcontentlength", "getlastmodified", "getcontenttype"]
    )


def build_content_type_body() -> bytes:
    """PROPFIND body used for listings, only the content type is needed"""
    return build_propfind_body(["getcontenttype"])


def _prop_name_to_element(name: str) -> Optional[BaseElement]:
    """
    Convert a property name string to the corresponding element.
    Unknown names are ignored.
    """
    prop_map = {cls.localname(): cls for cls in LIVE_PROPERTIES}

    element_class = prop_map.get(name.lower())
    if element_class is None:
        return None
    return element_class()
