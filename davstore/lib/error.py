#!/usr/bin/env python
import logging
import os
from typing import Optional

from davstore import __version__

## one of DEBUG, DEVELOPMENT, PRODUCTION.  The davstore logger is set
## to DEBUG, INFO and WARNING respectively.
debugmode = os.environ.get("PYTHON_DAVSTORE_DEBUGMODE")
if not debugmode:
    if "dev" in __version__ or __version__ == "(unknown)":
        debugmode = "DEVELOPMENT"
    else:
        debugmode = "PRODUCTION"

log = logging.getLogger("davstore")
if debugmode.startswith("DEBUG"):
    log.setLevel(logging.DEBUG)
elif debugmode == "DEVELOPMENT":
    log.setLevel(logging.INFO)
else:
    log.setLevel(logging.WARNING)


def errmsg(r) -> str:
    """Utility for formatting an error response to an error string"""
    return "%s %s\n\n%s" % (r.status, r.reason, r.raw)


class DAVError(Exception):
    url: Optional[str] = None
    reason: str = "no reason"

    def __init__(self, url: Optional[str] = None, reason: Optional[str] = None) -> None:
        if url:
            self.url = url
        if reason:
            self.reason = reason

    def __str__(self) -> str:
        return "%s at '%s', reason %s" % (
            self.__class__.__name__,
            self.url,
            self.reason,
        )


class AuthorizationError(DAVError):
    """
    The client was configured with credentials it can't use, or the
    server asked for an authentication scheme we don't support.
    """

    pass


class MultiStatusError(DAVError):
    """
    A response that is not a 207 Multi-Status was fed to the
    multi-status parser.  This is a bug in the calling code, not
    something the server can provoke.
    """

    pass


class RedirectError(DAVError):
    """
    The server answered a PROPFIND with a redirect, but didn't tell
    where to go.
    """

    pass


class ContentRetrievalError(DAVError):
    """
    GET did not deliver the contents of a resource.  The url property
    holds the resource, the reason property the status we got (if any).
    """

    pass
