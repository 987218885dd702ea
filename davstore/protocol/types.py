"""
Core protocol types for the WebDAV storage client.

These dataclasses represent the parsed outcome of WebDAV responses,
independent of the HTTP library that delivered them.  All of them are
short-lived: they are built from one response and thrown away when the
client operation returning them is done.
"""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, Optional

from lxml.etree import _Element


class DAVMethod(Enum):
    """WebDAV/HTTP methods used by the storage client."""

    GET = "GET"
    HEAD = "HEAD"
    PUT = "PUT"
    DELETE = "DELETE"
    MKCOL = "MKCOL"
    COPY = "COPY"
    MOVE = "MOVE"
    PROPFIND = "PROPFIND"


class ResourceKind(Enum):
    """What a path in a listing refers to."""

    FILE = "file"
    DIRECTORY = "directory"


@dataclass(frozen=True)
class MultiStatusEntry:
    """
    One DAV:response element of a 207 Multi-Status body.

    Attributes:
        path: Storage-relative path of the resource, always starting with "/"
        status: The status code from the embedded status line
        prop: The DAV:prop element, for the caller to pick properties from
    """

    path: str
    status: int
    prop: _Element


@dataclass
class ResourceProperties:
    """
    The basic live properties of one resource.

    A field is None when the server didn't deliver the property or it
    couldn't be parsed.  None is "unknown", it never means 0 or "".

    Attributes:
        ctime: Creation time in epoch seconds (DAV:creationdate)
        size: Content length in bytes (DAV:getcontentlength)
        mtime: Last modification in epoch seconds (DAV:getlastmodified)
        mimetype: Content type (DAV:getcontenttype)
    """

    ctime: Optional[int] = None
    size: Optional[int] = None
    mtime: Optional[int] = None
    mimetype: Optional[str] = None

    def as_dict(self) -> Dict[str, Any]:
        """Only the properties that are known"""
        return {k: v for k, v in asdict(self).items() if v is not None}

    def __bool__(self) -> bool:
        return bool(self.as_dict())


DescendantMap = Dict[str, ResourceKind]
