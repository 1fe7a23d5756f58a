# Copyright (c) 2011-2021. See LICENSE for details.

"""
Internal interface definitions.

All Zope Interface classes should be imported from here so that type checking
works, since mypy doesn't otherwise get along with Zope Interface.
"""

from ._imessage import (
    IHTTPHeaders,
    IHTTPResponse,
    IMutableHTTPHeaders,
    InvalidStatusCode,
    IResponseTransport,
)


__all__ = (
    "IHTTPHeaders",
    "IHTTPResponse",
    "IMutableHTTPHeaders",
    "IResponseTransport",
    "InvalidStatusCode",
)
