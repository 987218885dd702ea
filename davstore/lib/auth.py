"""
Authentication helpers for the storage client.

The client starts out without an auth object if no auth_type is
configured.  When the server answers 401, the schemes offered in the
WWW-Authenticate header are matched against the configured
credentials.
"""

from __future__ import annotations

from requests.auth import AuthBase


def extract_auth_types(header: str) -> set[str]:
    """
    Extract authentication types from WWW-Authenticate header.

    Example:
        >>> sorted(extract_auth_types('Basic realm="test", Digest realm="test"'))
        ['basic', 'digest']
    """
    return {h.split()[0] for h in header.lower().split(",") if h.strip()}


def select_auth_type(
    auth_types: set[str] | list[str],
    has_username: bool,
    has_password: bool,
) -> str | None:
    """
    Select the best authentication type from available options.

    With a username, digest is preferred over basic.  A password
    without a username is taken to be a bearer token.  None is
    returned if nothing fits.
    """
    auth_types = set(auth_types)

    if has_username:
        if "digest" in auth_types:
            return "digest"
        if "basic" in auth_types:
            return "basic"
    elif has_password:
        if "bearer" in auth_types:
            return "bearer"

    return None


class HTTPBearerAuth(AuthBase):
    """Sends the configured token as ``Authorization: Bearer <token>``"""

    def __init__(self, token: str) -> None:
        self.token = token

    def __eq__(self, other: object) -> bool:
        return self.token == getattr(other, "token", None)

    def __call__(self, r):
        r.headers["Authorization"] = f"Bearer {self.token}"
        return r
