# -*- test-case-name: rejoinder.test.test_response -*-
# Copyright (c) 2011-2021. See LICENSE for details.

"""
HTTP response API.
"""

from typing import Any, Dict, FrozenSet, List, Optional, Type, TypeVar, Union

from attr import Factory, attrib, attrs
from attr.validators import instance_of, optional
from hyperlink import URL, DecodedURL
from zope.interface import implementer

from twisted.logger import Logger

from ._attrs_zope import provides
from ._headers import MutableHTTPHeaders
from ._interfaces import IHTTPResponse, IResponseTransport
from ._status import (
    HTTP_10,
    isRedirectCode,
    reasonPhraseForCode,
    renderStatusLine,
    validateStatusCode,
)
from ._transport import MemoryTransport


__all__ = ()


log = Logger()

T = TypeVar("T", bound="HTTPResponse")

Snapshot = Dict[str, Any]

SERIALIZABLE_FIELDS: FrozenSet[str] = frozenset(
    ("body", "isRedirect", "statusCode")
)


def bodyAsBytes(value: object) -> bytes:
    """
    Coerce a body value to bytes.
    Text is encoded as UTF-8; C{None} is empty; anything else is converted to
    text first.
    """
    if value is None:
        return b""
    if isinstance(value, bytes):
        return value
    if not isinstance(value, str):
        value = str(value)
    return value.encode("utf-8")


@implementer(IHTTPResponse)
@attrs(frozen=False)
class HTTPResponse:
    """
    Mutable HTTP response.

    Handlers set the status, headers and body in any order, then send the
    response to its transport.
    Setters return the response, so calls may be chained::

        response.setHeader("Content-Type", "text/plain").setBody("Hello")

    @ivar headers: The response headers.
        Values added under the same name are kept, and sent, as separate
        header lines.
    @ivar transport: Where the response is sent.
        By default, a L{MemoryTransport}.
    """

    _statusCode: int = attrib(converter=validateStatusCode, default=200)
    _version: Optional[str] = attrib(
        validator=optional(instance_of(str)), default=None
    )
    _phrase: Optional[str] = attrib(
        validator=optional(instance_of(str)), default=None
    )
    transport: IResponseTransport = attrib(
        validator=provides(IResponseTransport),
        default=Factory(MemoryTransport),
    )

    headers: MutableHTTPHeaders = attrib(
        default=Factory(MutableHTTPHeaders), init=False
    )
    _body: bytes = attrib(default=b"", init=False)
    _redirect: bool = attrib(init=False)
    _headersSent: bool = attrib(default=False, init=False)
    _contentSent: bool = attrib(default=False, init=False)

    @_redirect.default
    def _redirectFromStatusCode(self) -> bool:
        return isRedirectCode(self._statusCode)

    # Headers

    def getHeaders(self) -> MutableHTTPHeaders:
        return self.headers

    def getHeader(self, name: str) -> Optional[str]:
        """
        Look up a header without regard to case.

        @return: The first value of the header, even if there are more, or
            C{None} if the header is not set.
            Use L{getHeaderValues} to get every value.
        """
        for value in self.headers.getValues(name):
            return value
        return None

    def getHeaderValues(self, name: str) -> List[str]:
        return list(self.headers.getValues(name))

    def setHeader(
        self: T, name: str, value: object, replace: bool = False
    ) -> T:
        """
        Add a header line.

        @param value: The value; it is converted to text.
        @param replace: If C{True}, remove any existing values for the header
            first.
            Otherwise the value is added alongside existing ones.
        """
        text = str(value)

        if replace:
            self.clearHeader(name)

        self.headers.addValue(name, text)
        return self

    def clearHeader(self: T, name: str) -> T:
        self.headers.remove(name)
        return self

    def clearHeaders(self: T) -> T:
        self.headers.clear()
        return self

    # Body

    def getBody(self) -> bytes:
        return self._body

    def appendBody(self: T, value: object) -> T:
        self._body += bodyAsBytes(value)
        return self

    def setBody(self: T, value: object) -> T:
        self._body = bodyAsBytes(value)
        return self

    def clearBody(self: T) -> T:
        self._body = b""
        return self

    # Status

    def getHttpResponseCode(self) -> int:
        return self._statusCode

    def setHttpResponseCode(self: T, code: object) -> T:
        """
        Set the status code.

        @raise InvalidStatusCode: If C{code} is not numeric or is not within
            C{[100, 599]}.
            The response is not modified.
        """
        statusCode = validateStatusCode(code)

        self._redirect = isRedirectCode(statusCode)
        self._statusCode = statusCode
        return self

    def isRedirect(self) -> bool:
        return self._redirect

    def setRedirect(
        self: T, url: Union[str, URL, DecodedURL], code: object = 302
    ) -> T:
        """
        Redirect to the given URL, replacing any earlier redirect target.
        """
        if isinstance(url, (URL, DecodedURL)):
            url = url.to_uri().to_text()

        self.setHeader("Location", url, True)
        self.setHttpResponseCode(code)
        return self

    def getVersion(self) -> str:
        """
        The HTTP version for the status line.

        If no version was set, it is detected with L{detectVersion}.
        """
        if self._version is None:
            return self.detectVersion()
        return self._version

    def setVersion(self: T, version: str) -> T:
        self._version = version
        return self

    def detectVersion(self) -> str:
        """
        Use the version the client spoke, as far as the transport knows,
        falling back to HTTP/1.0.
        """
        version = self.transport.clientVersion()
        if version is None:
            return HTTP_10
        return version

    def getReasonPhrase(self) -> str:
        """
        The reason phrase for the status line.

        If no phrase was set, the conventional phrase for the status code.
        """
        if self._phrase is None:
            return reasonPhraseForCode(self._statusCode)
        return self._phrase

    def setReasonPhrase(self: T, phrase: str) -> T:
        self._phrase = phrase
        return self

    def setStatusHeader(
        self: T,
        httpCode: object,
        version: Optional[str] = None,
        phrase: Optional[str] = None,
    ) -> T:
        """
        Set the version, status code and reason phrase together.

        @param version: The HTTP version; detected if not given.
        @param phrase: The reason phrase.
            If not given, the phrase the response has before the code
            changes is kept, even if it is the conventional phrase of the
            previous code.

        @raise InvalidStatusCode: If C{httpCode} is not valid.
            The response is not modified.
        """
        statusCode = validateStatusCode(httpCode)

        if version is None:
            version = self.detectVersion()
        if phrase is None:
            phrase = self.getReasonPhrase()

        self._version = version
        self.setHttpResponseCode(statusCode)
        self._phrase = phrase
        return self

    def renderStatusLine(self) -> bytes:
        return renderStatusLine(
            self.getVersion(), self._statusCode, self.getReasonPhrase()
        )

    # Serialization

    def serializableFields(self) -> FrozenSet[str]:
        """
        The names of the fields that are kept when the response is
        serialized.
        Headers, version and reason phrase are not.
        """
        return SERIALIZABLE_FIELDS

    def snapshot(self) -> Snapshot:
        return {
            "body": self._body,
            "isRedirect": self._redirect,
            "statusCode": self._statusCode,
        }

    @classmethod
    def fromSnapshot(cls: Type[T], snapshot: Snapshot) -> T:
        """
        Rebuild a response from L{snapshot} data.

        The rebuilt response has no headers and a new L{MemoryTransport}.
        """
        response = cls(statusCode=snapshot["statusCode"])
        response._body = bodyAsBytes(snapshot["body"])
        response._redirect = bool(snapshot["isRedirect"])
        return response

    def __getstate__(self) -> Snapshot:
        return self.snapshot()

    def __setstate__(self, state: Snapshot) -> None:
        self.__dict__.update(self.fromSnapshot(state).__dict__)

    # Sending

    def headersSent(self) -> bool:
        return self._headersSent

    def contentSent(self) -> bool:
        return self._contentSent

    def sendHeaders(self: T) -> T:
        """
        Send the status line and the headers to the transport.

        Every stored header value is sent as its own header line, so headers
        with several values (such as C{Set-Cookie}) are not collapsed.
        Does nothing if the headers were already sent.
        """
        if self._headersSent:
            return self

        self.transport.sendStatus(
            self.getVersion(), self._statusCode, self.getReasonPhrase()
        )
        for name, value in self.headers.rawHeaders:
            self.transport.sendHeader(name, value, False)

        self._headersSent = True
        log.debug(
            "Sent headers for {code} response", code=self._statusCode
        )
        return self

    def sendContent(self: T) -> T:
        """
        Send the body to the transport and finish it.

        Does nothing if the body was already sent.
        """
        if self._contentSent:
            return self

        if self._body:
            self.transport.write(self._body)
        self.transport.finish()

        self._contentSent = True
        log.debug("Sent {size} byte body", size=len(self._body))
        return self

    def sendResponse(self) -> None:
        """
        Send the status line, the headers and the body.
        """
        self.sendHeaders()
        self.sendContent()
