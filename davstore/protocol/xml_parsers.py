"""
Functions for parsing WebDAV XML responses.

The functions in this module take XML bytes in and return structured
data out.  They don't do any I/O, but they do log what they have to
throw away - a malformed response element is dropped, not raised.
"""

import logging
import re
from datetime import datetime, timezone
from typing import Callable, Dict, List, Mapping, Optional, Tuple, Union

from dateutil import parser as dateparser
from lxml import etree
from lxml.etree import _Element

from davstore.elements import dav
from davstore.lib import error
from davstore.lib.debug import xmlstring
from davstore.lib.url import URL

from .types import DescendantMap, MultiStatusEntry, ResourceKind, ResourceProperties

log = logging.getLogger("davstore")

STATUS_LINE = re.compile(r"^HTTP/[^ ]+ (\d{3}) .+$")

DIRECTORY_CONTENT_TYPE = "httpd/unix-directory"


def parse_multistatus(
    status: int,
    body: bytes,
    base_url: Union[URL, str],
    headers: Optional[Mapping[str, str]] = None,
    logger: Optional[logging.Logger] = None,
) -> List[MultiStatusEntry]:
    """
    Split a 207 Multi-Status response body into its entries.

    Args:
        status: HTTP status code of the response
        body: Raw XML response bytes
        base_url: The WebDAV root, hrefs are made relative to it
        headers: Response headers, only used for logging
        logger: Where to log dropped entries

    Returns:
        One MultiStatusEntry per usable DAV:response, in document order

    Raises:
        MultiStatusError: If status is not 207
    """
    logger = logger or log
    if status != 207:
        logger.critical(
            "Should split multi-status response that does not have status code 207. "
            "status=%s headers=%s body=%r",
            status,
            dict(headers or {}),
            body,
        )
        raise error.MultiStatusError(reason="Response is not a Multi-Status response")

    try:
        tree = etree.fromstring(body, etree.XMLParser(remove_blank_text=True))
    except (etree.XMLSyntaxError, ValueError):
        logger.error(
            "Got invalid XML in response. headers=%s body=%r",
            dict(headers or {}),
            body,
            exc_info=True,
        )
        return []

    base_url = URL.objectify(base_url)
    entries: List[MultiStatusEntry] = []
    for elem in _strip_to_multistatus(tree):
        if elem.tag != dav.Response.tag:
            continue
        entry = _parse_response_element(elem, base_url, logger)
        if entry is not None:
            entries.append(entry)
    return entries


def extract_properties(
    prop: _Element, logger: Optional[logging.Logger] = None
) -> ResourceProperties:
    """
    Turn a DAV:prop element into ResourceProperties.  Properties not
    listed in PROPERTY_SCHEMA are ignored.  Properties with a value
    that can't be parsed are logged and left out.
    """
    logger = logger or log
    values = {}
    for child in prop:
        if child.tag not in PROPERTY_SCHEMA:
            continue
        text = child.text
        if text is None or not text.strip():
            continue
        key, convert = PROPERTY_SCHEMA[child.tag]
        try:
            values[key] = convert(text.strip())
        except (ValueError, OverflowError):
            logger.warning(
                "Could not parse property %s with value %r, ignoring it",
                etree.QName(child).localname,
                text,
            )
    return ResourceProperties(**values)


def resource_kind(prop: _Element) -> ResourceKind:
    """
    A resource is a directory if and only if the server says its
    content type is httpd/unix-directory.
    """
    node = prop.find(".//" + dav.GetContentType.tag)
    if node is not None and (node.text or "").strip() == DIRECTORY_CONTENT_TYPE:
        return ResourceKind.DIRECTORY
    return ResourceKind.FILE


def descendant_map(entries: List[MultiStatusEntry]) -> DescendantMap:
    """Path to kind for every entry"""
    return {entry.path: resource_kind(entry.prop) for entry in entries}


def resolve_href(href: str, base_url: Union[URL, str]) -> str:
    """
    Make a storage-relative path of an href from a multistatus response.

    The href may be a full URL or just a path.  A path is put on the
    scheme and host of the base URL.  Then the base URL is cut off.
    """
    base_url = URL.objectify(base_url)
    if "://" in href:
        resource_url = URL(href)
    else:
        resource_url = base_url.with_path(href)
    return resource_url.strip_base(base_url)


# Helper functions


def _parse_creationdate(text: str) -> int:
    ## DAV:creationdate is RFC 3339, python before 3.11 doesn't know "Z"
    if text.endswith("Z") or text.endswith("z"):
        text = text[:-1] + "+00:00"
    return _to_epoch(datetime.fromisoformat(text))


def _parse_lastmodified(text: str) -> int:
    ## DAV:getlastmodified should be RFC 1123, but anything goes
    return _to_epoch(dateparser.parse(text))


def _to_epoch(dt: datetime) -> int:
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return int(dt.timestamp())


PROPERTY_SCHEMA: Dict[str, Tuple[str, Callable[[str], object]]] = {
    dav.CreationDate.tag: ("ctime", _parse_creationdate),
    dav.GetContentLength.tag: ("size", int),
    dav.GetLastModified.tag: ("mtime", _parse_lastmodified),
    dav.GetContentType.tag: ("mimetype", str),
}


def _strip_to_multistatus(tree: _Element) -> Union[_Element, List[_Element]]:
    """
    Strip outer elements to get to the multistatus content.

    The general format is:
        <multistatus>
            <response>...</response>
            <response>...</response>
        </multistatus>

    Anything else has no responses in it, except for a lone response
    element which we accept as a one-element list.
    """
    if tree.tag == dav.MultiStatus.tag:
        return tree
    if tree.tag == dav.Response.tag:
        return [tree]
    return []


def _first(elem: _Element, *paths: str) -> Optional[_Element]:
    for path in paths:
        found = elem.find(path)
        if found is not None:
            return found
    return None


def _parse_response_element(
    response: _Element, base_url: URL, logger: logging.Logger
) -> Optional[MultiStatusEntry]:
    """
    Parse a single DAV:response element.  Returns None if the element
    lacks a href, a status or a prop.
    """
    href = response.find(dav.Href.tag)
    if href is None or not (href.text or "").strip():
        logger.error(
            "Got multistatus response without URI: %s", xmlstring(response)
        )
        return None

    status = _first(
        response,
        "%s/%s" % (dav.PropStat.tag, dav.Status.tag),
        dav.Status.tag,
    )
    if status is None or not (status.text or "").strip():
        logger.error(
            "Got multistatus response without HTTP status: %s", xmlstring(response)
        )
        return None

    prop = _first(
        response,
        "%s/%s" % (dav.PropStat.tag, dav.Prop.tag),
        dav.Prop.tag,
    )
    if prop is None:
        logger.error(
            "Got multistatus response without <prop> nodes: %s", xmlstring(response)
        )
        return None

    match = STATUS_LINE.match(status.text.strip())
    if match is None:
        logger.error("Could not parse HTTP status line: %s", xmlstring(response))
        return None

    return MultiStatusEntry(
        path=resolve_href(href.text.strip(), base_url),
        status=int(match.group(1)),
        prop=prop,
    )
