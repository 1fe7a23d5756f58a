# Copyright (c) 2011-2021. See LICENSE for details.

"""
Interfaces related to HTTP responses.

Do not import directly from here, except:
 - From _interfaces.py.
 - From implementations of these interfaces, but even then, import the
   zope.interface.Interface classes via _interfaces.py.

This will ensure that type checking works.
"""

from typing import AnyStr, Iterable, MutableSequence, Optional, Sequence, Tuple

from zope.interface import Attribute, Interface


__all__ = ()


RawHeader = Tuple[bytes, bytes]
RawHeaders = Sequence[RawHeader]
MutableRawHeaders = MutableSequence[RawHeader]


class InvalidStatusCode(ValueError):
    """
    An HTTP response code was not numeric or not within C{[100, 599]}.
    """

    def __init__(self, code: object) -> None:
        super().__init__("Invalid HTTP response code")
        self.code = code


class IHTTPHeaders(Interface):
    """
    HTTP entity headers.

    Header names and values are made available as the raw bytes that are
    written to the network, as an ordered sequence of name and value pairs.
    Headers with multiple values are stored as separate pairs, so that they
    can be written out as separate header lines.

    Text names and values are encoded as ISO-8859-1, or as UTF-8 if
    ISO-8859-1 cannot represent them.
    Line breaks in names and values are replaced with spaces.
    """

    rawHeaders: RawHeaders = Attribute(
        """
        Raw header data as a tuple in the form: C{((name, value), ...)}.
        C{name} and C{value} are bytes; C{name} is lower case.
        Headers are provided in the order that they were added.
        """
    )

    def getValues(name: AnyStr) -> Iterable[AnyStr]:
        """
        Get the values associated with the given header name.

        If the given name is L{bytes}, the value will be returned as the raw
        header L{bytes}.

        If the given name is L{str}, the name will be encoded as ISO-8859-1
        and the value will be returned as text, by decoding the raw header
        value bytes with ISO-8859-1.

        @param name: The name of the header to look for, compared without
            regard to case.

        @return: The values of the header with the given name.
        """


class IMutableHTTPHeaders(IHTTPHeaders):
    """
    Mutable HTTP entity headers.
    """

    def remove(name: AnyStr) -> None:
        """
        Remove all header name/value pairs for the given header name.

        Removing a name that is not present does nothing.
        """

    def addValue(name: AnyStr, value: AnyStr) -> None:
        """
        Add the given header name/value pair after any existing pairs,
        including pairs with the same name.

        If the given name is L{bytes}, the value must also be L{bytes}.
        If the given name is L{str}, the value must also be L{str}.
        """

    def clear() -> None:
        """
        Remove every header.
        """


class IResponseTransport(Interface):
    """
    Somewhere a response can be written to.
    """

    def clientVersion() -> Optional[str]:
        """
        The HTTP version spoken by the client, such as C{"1.1"}, if known.
        """

    def sendStatus(version: str, code: int, phrase: str) -> None:
        """
        Emit the status line.
        """

    def sendHeader(name: bytes, value: bytes, replace: bool) -> None:
        """
        Emit a header line.

        @param replace: If C{False}, the line is added alongside any lines
            previously emitted with the same name.
            If C{True}, those lines are discarded first.
        """

    def write(data: bytes) -> None:
        """
        Emit body data.
        """

    def finish() -> None:
        """
        No more data will be written.
        """


class IHTTPResponse(Interface):
    """
    Mutable HTTP response.
    """

    headers: IMutableHTTPHeaders = Attribute("Entity headers.")

    transport: IResponseTransport = Attribute(
        "The transport the response is sent to."
    )

    def getHttpResponseCode() -> int:
        """
        The response status code.
        """

    def setHttpResponseCode(code: object) -> "IHTTPResponse":
        """
        Set the response status code.

        @raise InvalidStatusCode: If C{code} is not numeric or is not within
            C{[100, 599]}.
        """

    def isRedirect() -> bool:
        """
        Whether the status code was set to a redirect (C{300} to C{307}).
        """

    def getHeader(name: str) -> Optional[str]:
        """
        The first value of the header with the given name, or C{None}.
        """

    def setHeader(
        name: str, value: object, replace: bool = False
    ) -> "IHTTPResponse":
        """
        Add a header value, first removing existing values if C{replace}.
        """

    def getBody() -> bytes:
        """
        The response body.
        """

    def sendHeaders() -> "IHTTPResponse":
        """
        Send the status line and headers to the transport, once.
        """

    def sendResponse() -> None:
        """
        Send the complete response to the transport.
        """
