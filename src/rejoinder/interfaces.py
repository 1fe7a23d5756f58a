from ._interfaces import (
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
