# -*- test-case-name: rejoinder.test.test_transport -*-
# Copyright (c) 2011-2021. See LICENSE for details.

"""
Transports that responses are sent to.
"""

import os
from typing import BinaryIO, Mapping, Optional

from attr import Factory, attrib, attrs
from attr.validators import instance_of, optional
from zope.interface import implementer

from twisted.logger import Logger
from twisted.web.iweb import IRequest

from ._attrs_zope import provides
from ._headers import MutableHTTPHeaders, canonicalHeaderName
from ._headers_compat import HTTPHeadersWrappingHeaders
from ._interfaces import IMutableHTTPHeaders, IResponseTransport
from ._status import renderStatusLine, versionFromProtocol


__all__ = ()


log = Logger()


def _sendHeaderTo(
    headers: IMutableHTTPHeaders, name: bytes, value: bytes, replace: bool
) -> None:
    if replace:
        headers.remove(name)
    headers.addValue(name, value)


@implementer(IResponseTransport)
@attrs(frozen=False)
class MemoryTransport:
    """
    Transport that keeps everything sent to it.

    @ivar protocol: The protocol the client is pretending to speak, such as
        C{"HTTP/1.1"}, or C{None} if unknown.
    @ivar statusLine: The rendered status line, once sent.
    @ivar headers: The header lines sent so far.
    @ivar body: The body data written so far.
    @ivar finished: Whether L{finish} was called.
    """

    protocol: Optional[str] = attrib(
        validator=optional(instance_of(str)), default=None
    )

    statusLine: Optional[bytes] = attrib(default=None, init=False)
    headers: MutableHTTPHeaders = attrib(
        default=Factory(MutableHTTPHeaders), init=False
    )
    body: bytes = attrib(default=b"", init=False)
    finished: bool = attrib(default=False, init=False)

    def clientVersion(self) -> Optional[str]:
        if self.protocol is None:
            return None
        return versionFromProtocol(self.protocol)

    def sendStatus(self, version: str, code: int, phrase: str) -> None:
        self.statusLine = renderStatusLine(version, code, phrase)

    def sendHeader(self, name: bytes, value: bytes, replace: bool) -> None:
        _sendHeaderTo(self.headers, name, value, replace)

    def write(self, data: bytes) -> None:
        if self.finished:
            raise RuntimeError("write() called after finish()")
        self.body += data

    def finish(self) -> None:
        self.finished = True


@implementer(IResponseTransport)
@attrs(frozen=False)
class StreamTransport:
    """
    Transport that writes an HTTP response to a binary stream, such as the
    standard output of a CGI-style process.

    The status line and header lines are held until the first body write (or
    until L{finish}) so that header lines can still be replaced up to then.

    @ivar environ: Process environment; C{SERVER_PROTOCOL} is consulted for
        the client's HTTP version.
    """

    _stream: BinaryIO = attrib()
    _environ: Mapping[str, str] = attrib(default=Factory(lambda: os.environ))

    _statusLine: Optional[bytes] = attrib(default=None, init=False)
    _headers: MutableHTTPHeaders = attrib(
        default=Factory(MutableHTTPHeaders), init=False
    )
    _headWritten: bool = attrib(default=False, init=False)

    def clientVersion(self) -> Optional[str]:
        protocol = self._environ.get("SERVER_PROTOCOL")
        if protocol is None:
            return None
        return versionFromProtocol(protocol)

    def sendStatus(self, version: str, code: int, phrase: str) -> None:
        if self._headWritten:
            raise RuntimeError("status sent after the response head")
        self._statusLine = renderStatusLine(version, code, phrase)

    def sendHeader(self, name: bytes, value: bytes, replace: bool) -> None:
        if self._headWritten:
            raise RuntimeError("header sent after the response head")
        _sendHeaderTo(self._headers, name, value, replace)

    def _writeHead(self) -> None:
        if self._headWritten:
            return
        self._headWritten = True

        lines = []
        if self._statusLine is not None:
            lines.append(self._statusLine)
        for name, value in self._headers.rawHeaders:
            lines.append(canonicalHeaderName(name) + b": " + value)
        lines.append(b"")

        self._stream.write(b"".join(line + b"\r\n" for line in lines))
        log.debug(
            "Wrote response head with {count} header lines",
            count=len(self._headers.rawHeaders),
        )

    def write(self, data: bytes) -> None:
        self._writeHead()
        if data:
            self._stream.write(data)

    def finish(self) -> None:
        self._writeHead()
        self._stream.flush()


@implementer(IResponseTransport)
@attrs(frozen=True)
class RequestTransport:
    """
    Transport that sends a response through a L{twisted.web} request.

    Twisted writes the status line itself, using the version the client
    spoke, so the version given to L{sendStatus} is not used.
    """

    _request: IRequest = attrib(validator=provides(IRequest))

    def clientVersion(self) -> Optional[str]:
        protocol = getattr(self._request, "clientproto", None)
        if not protocol:
            return None
        return versionFromProtocol(protocol)

    def sendStatus(self, version: str, code: int, phrase: str) -> None:
        self._request.setResponseCode(code, phrase.encode("iso-8859-1"))

    def sendHeader(self, name: bytes, value: bytes, replace: bool) -> None:
        headers = HTTPHeadersWrappingHeaders(
            headers=self._request.responseHeaders
        )
        _sendHeaderTo(headers, name, value, replace)

    def write(self, data: bytes) -> None:
        self._request.write(data)

    def finish(self) -> None:
        self._request.finish()
