#!/usr/bin/env python
import sys
from typing import Optional
from typing import Union
from urllib.parse import ParseResult
from urllib.parse import quote
from urllib.parse import SplitResult
from urllib.parse import unquote
from urllib.parse import urlparse
from urllib.parse import urlunparse

from davstore.lib.python_utilities import to_normal_str

if sys.version_info < (3, 11):
    from typing_extensions import Self
else:
    from typing import Self

DEFAULT_PORTS = {"https": 443, "http": 80}


class URL:
    """
    Wraps an URL string, handing out the attributes of the parsed form
    (``scheme``, ``netloc``, ``path``, ``username``, ``port``, ...)
    on demand.  Used internally; all methods of the client accept
    plain strings.

    The client deals with two kinds of addresses:

    * the WebDAV root, i.e. "https://dav.example.com/remote.php/webdav"
    * hrefs in multistatus responses, either an absolute path like
      "/remote.php/webdav/photos/a.jpg" or a fully qualified URL.
    """

    def __init__(self, url: Union[str, bytes, ParseResult, SplitResult]) -> None:
        if isinstance(url, (ParseResult, SplitResult)):
            self._parsed: Optional[ParseResult] = (
                url if isinstance(url, ParseResult) else None
            )
            self._raw = url.geturl()
        else:
            self._parsed = None
            self._raw = to_normal_str(url) or ""

    @classmethod
    def objectify(cls, url: Union[Self, str, ParseResult, SplitResult, None]) -> Optional[Self]:
        if url is None or isinstance(url, URL):
            return url
        return cls(url)

    def __getattr__(self, attr: str):
        ## __getattr__ is only consulted for attributes not found the
        ## usual way.  Guard against recursion while unpickling.
        if attr.startswith("_"):
            raise AttributeError(attr)
        return getattr(self._parse(), attr)

    def _parse(self) -> ParseResult:
        if self._parsed is None:
            self._parsed = urlparse(self._raw)
        return self._parsed

    def __bool__(self) -> bool:
        return bool(self._raw)

    def __str__(self) -> str:
        return self._raw

    def __repr__(self) -> str:
        return "URL(%s)" % self._raw

    def __eq__(self, other: object) -> bool:
        if str(self) == str(other):
            return True
        if not isinstance(other, URL):
            other = URL(str(other))
        return str(self.canonical()) == str(other.canonical())

    def __ne__(self, other: object) -> bool:
        return not self == other

    def __hash__(self) -> int:
        return hash(self._raw)

    def is_auth(self) -> bool:
        return self.username is not None

    def _netloc_without_auth(self) -> str:
        netloc = self.hostname or ""
        if ":" in netloc:
            netloc = "[%s]" % netloc
        if self.port:
            netloc = "%s:%s" % (netloc, self.port)
        return netloc

    def unauth(self) -> "URL":
        """
        The same URL without username and password.  The port is kept
        if one was given.
        """
        if not self.is_auth():
            return self
        return URL(self._parse()._replace(netloc=self._netloc_without_auth()))

    def canonical(self) -> "URL":
        """
        Credentials removed, the default port spelled out, double
        slashes collapsed and the path quoted the same way every time.
        Two URLs pointing at the same resource have the same canonical
        form.
        """
        scheme = self.scheme or "https"
        netloc = self._netloc_without_auth()
        if netloc and not self.port and scheme in DEFAULT_PORTS:
            netloc += ":%i" % DEFAULT_PORTS[scheme]
        path = quote(unquote(self.path.replace("//", "/")))
        return URL(urlunparse((scheme, netloc, path, self.params, self.query, self.fragment)))

    def with_path(self, path: str) -> "URL":
        """
        Same scheme and authority as self, but with the given path.
        Query and fragment are dropped.
        """
        return URL(ParseResult(self.scheme, self.netloc, path, "", "", ""))

    def strip_base(self, base: Union["URL", str]) -> str:
        """
        The part of this URL below the base URL, as a path with exactly
        one leading slash.  The base is removed as a plain string prefix
        of the serialized URLs, so both should be on the same form
        (i.e. both unauthenticated).  If this URL isn't below the base,
        the leading characters are cut anyhow.
        """
        tail = str(self)[len(str(base)) :]
        return "/" + tail.lstrip("/")


def concat_paths(base: Union[URL, str], path: str) -> str:
    """
    base and path joined with exactly one slash in between
    """
    return str(base).rstrip("/") + "/" + path.lstrip("/")
