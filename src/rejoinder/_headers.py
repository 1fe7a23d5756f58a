# -*- test-case-name: rejoinder.test.test_headers -*-
# Copyright (c) 2011-2021. See LICENSE for details.

"""
HTTP headers API.
"""

from typing import AnyStr, Iterable, List, Tuple, Union

from attr import Factory, attrib, attrs
from zope.interface import implementer

from ._interfaces import IMutableHTTPHeaders
from ._imessage import MutableRawHeaders, RawHeader, RawHeaders


__all__ = ()


String = Union[bytes, str]


# Encoding/decoding header data

HEADER_NAME_ENCODING = "iso-8859-1"
HEADER_VALUE_ENCODING = "iso-8859-1"


def headerNameAsBytes(name: String) -> bytes:
    """
    Convert a header name to bytes if necessary.
    """
    if isinstance(name, bytes):
        return name
    try:
        return name.encode(HEADER_NAME_ENCODING)
    except UnicodeEncodeError:
        return name.encode("utf-8")


def headerValueAsBytes(value: String) -> bytes:
    """
    Convert a header value to bytes if necessary.

    Text that ISO-8859-1 cannot represent is encoded as UTF-8, as
    L{twisted.web.http_headers.Headers} does.
    """
    if isinstance(value, bytes):
        return value
    try:
        return value.encode(HEADER_VALUE_ENCODING)
    except UnicodeEncodeError:
        return value.encode("utf-8")


def sanitizeLinearWhitespace(data: bytes) -> bytes:
    """
    Replace line breaks with spaces, so that a header name or value can't
    start a new header line.
    """
    for lineBreak in (b"\r\n", b"\r", b"\n"):
        data = data.replace(lineBreak, b" ")
    return data


def headerValueAsText(value: String) -> str:
    """
    Convert a header value to str if necessary.
    """
    if isinstance(value, str):
        return value
    else:
        return value.decode(HEADER_VALUE_ENCODING)


def normalizeHeaderName(name: AnyStr) -> AnyStr:
    """
    Normalize a header name.
    """
    return name.lower()


def canonicalHeaderName(name: bytes) -> bytes:
    """
    Capitalize each dash-separated word of a header name, the way header
    names are conventionally written on the wire.

    C{b"set-cookie"} becomes C{b"Set-Cookie"}.
    """
    return b"-".join(word.capitalize() for word in name.split(b"-"))


# Internal data representation


def rawHeaderName(name: String) -> bytes:
    """
    Convert a header name into its normalized raw form.
    """
    if isinstance(name, (bytes, str)):
        return sanitizeLinearWhitespace(
            normalizeHeaderName(headerNameAsBytes(name))
        )

    raise TypeError(f"name {name!r} must be str or bytes")


def rawHeaderValue(rawName: bytes, value: String) -> RawHeader:
    return (rawName, sanitizeLinearWhitespace(headerValueAsBytes(value)))


def rawHeaderNameAndValue(name: String, value: String) -> RawHeader:
    """
    Convert a header name and value into a normalized raw header pair.

    The value must be of the same type as the name.
    """
    if isinstance(name, bytes):
        if not isinstance(value, bytes):
            raise TypeError(
                f"value {value!r} must be bytes to match name {name!r}"
            )
    elif isinstance(name, str):
        if not isinstance(value, str):
            raise TypeError(
                f"value {value!r} must be str to match name {name!r}"
            )
    else:
        raise TypeError(f"name {name!r} must be str or bytes")

    return rawHeaderValue(rawHeaderName(name), value)


def normalizeRawHeaders(
    headerPairs: Iterable[Iterable[String]],
) -> MutableRawHeaders:
    rawHeaders: List[Tuple[bytes, bytes]] = []

    for pair in headerPairs:
        try:
            name, value = pair
        except ValueError:
            raise ValueError("header pair must be a 2-item iterable")

        rawHeaders.append(rawHeaderValue(rawHeaderName(name), value))

    return rawHeaders


def getFromRawHeaders(rawHeaders: RawHeaders, name: AnyStr) -> Iterable[AnyStr]:
    """
    Get a value from raw headers.
    """
    rawName = rawHeaderName(name)
    values = (v for n, v in rawHeaders if rawName == n)

    if isinstance(name, str):
        return (headerValueAsText(v) for v in values)

    return values


# Implementation


@implementer(IMutableHTTPHeaders)
@attrs(frozen=True)
class MutableHTTPHeaders:
    """
    Mutable HTTP entity headers.

    Names are compared without regard to case; values stored under the same
    name are kept as separate pairs, in the order they were added.
    """

    _rawHeaders: MutableRawHeaders = attrib(
        converter=normalizeRawHeaders,
        default=Factory(list),
    )

    @property
    def rawHeaders(self) -> RawHeaders:
        return tuple(self._rawHeaders)

    def getValues(self, name: AnyStr) -> Iterable[AnyStr]:
        return getFromRawHeaders(self._rawHeaders, name)

    def remove(self, name: String) -> None:
        rawName = rawHeaderName(name)

        self._rawHeaders[:] = [p for p in self._rawHeaders if p[0] != rawName]

    def addValue(self, name: AnyStr, value: AnyStr) -> None:
        self._rawHeaders.append(rawHeaderNameAndValue(name, value))

    def clear(self) -> None:
        del self._rawHeaders[:]
