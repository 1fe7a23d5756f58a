from ._headers import MutableHTTPHeaders
from ._headers_compat import HTTPHeadersWrappingHeaders
from ._interfaces import InvalidStatusCode
from ._resource import ResponseResource
from ._response import HTTPResponse
from ._transport import MemoryTransport, RequestTransport, StreamTransport
from ._version import __version__ as _incremental_version


__all__ = (
    "HTTPHeadersWrappingHeaders",
    "HTTPResponse",
    "InvalidStatusCode",
    "MemoryTransport",
    "MutableHTTPHeaders",
    "RequestTransport",
    "ResponseResource",
    "StreamTransport",
    "__author__",
    "__copyright__",
    "__license__",
    "__version__",
)


# Make it a str, for backwards compatibility
__version__ = _incremental_version.base()

__author__ = "The Rejoinder contributors (see AUTHORS)"
__license__ = "MIT"
__copyright__ = f"Copyright 2011-2021 {__author__}"
