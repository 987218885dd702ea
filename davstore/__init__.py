#!/usr/bin/env python
import logging

__version__ = "0.3.0"

from .davclient import DAVResponse
from .davclient import DAVStorageClient
from .protocol.types import ResourceKind
from .protocol.types import ResourceProperties

# Silence notification of no default logging handler
log = logging.getLogger("davstore")
log.addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "DAVResponse",
    "DAVStorageClient",
    "ResourceKind",
    "ResourceProperties",
]
