# -*- test-case-name: rejoinder.test.test_headers_compat -*-
# Copyright (c) 2011-2021. See LICENSE for details.

"""
Support for interoperability with L{twisted.web.http_headers.Headers}.
"""

from typing import AnyStr, Iterable, Tuple, cast

from attr import attrib, attrs
from attr.validators import instance_of
from zope.interface import implementer

from twisted.web.http_headers import Headers

from ._headers import (
    RawHeaders,
    String,
    getFromRawHeaders,
    normalizeHeaderName,
    rawHeaderName,
    rawHeaderNameAndValue,
)
from ._interfaces import IMutableHTTPHeaders


__all__ = ()


@implementer(IMutableHTTPHeaders)
@attrs(frozen=True)
class HTTPHeadersWrappingHeaders:
    """
    HTTP entity headers.

    This is an L{IMutableHTTPHeaders} implementation that wraps a L{Headers}
    object, such as the C{responseHeaders} of a L{twisted.web.iweb.IRequest}.
    """

    # NOTE: In case Headers has different ideas about encoding text than we do,
    # always interact with it using bytes, not str.

    _headers: Headers = attrib(validator=instance_of(Headers))

    @property
    def rawHeaders(self) -> RawHeaders:
        def pairs() -> Iterable[Tuple[bytes, bytes]]:
            for name, values in self._headers.getAllRawHeaders():
                name = normalizeHeaderName(name)
                for value in values:
                    yield (name, value)

        return tuple(pairs())

    def getValues(self, name: AnyStr) -> Iterable[AnyStr]:
        rawName = rawHeaderName(name)
        # typing note: getRawHeaders is typed to return an optional even if
        # default is not None.
        values = cast(
            Iterable[bytes], self._headers.getRawHeaders(rawName, default=())
        )
        return getFromRawHeaders(
            tuple((rawName, value) for value in values), name
        )

    def remove(self, name: String) -> None:
        self._headers.removeHeader(rawHeaderName(name))

    def addValue(self, name: AnyStr, value: AnyStr) -> None:
        rawName, rawValue = rawHeaderNameAndValue(name, value)

        self._headers.addRawHeader(rawName, rawValue)

    def clear(self) -> None:
        for name, _values in list(self._headers.getAllRawHeaders()):
            self._headers.removeHeader(name)
