# -*- test-case-name: rejoinder.test.test_transport -*-
# Copyright (c) 2011-2021. See LICENSE for details.

"""
Tests for L{rejoinder._transport}.
"""

from io import BytesIO

from twisted.web.http_headers import Headers
from twisted.web.server import Request
from twisted.web.test.test_web import DummyChannel

from .._interfaces import IResponseTransport
from .._transport import MemoryTransport, RequestTransport, StreamTransport
from ._trial import TestCase


__all__ = ()


class MemoryTransportTests(TestCase):
    """
    Tests for L{MemoryTransport}.
    """

    def test_interface(self) -> None:
        """
        L{MemoryTransport} implements L{IResponseTransport}.
        """
        self.assertProvides(IResponseTransport, MemoryTransport())

    def test_clientVersion(self) -> None:
        """
        L{MemoryTransport.clientVersion} is derived from the protocol given
        at init time, if any.
        """
        self.assertIsNone(MemoryTransport().clientVersion())
        self.assertEqual(
            MemoryTransport(protocol="HTTP/1.1").clientVersion(), "1.1"
        )

    def test_records(self) -> None:
        """
        L{MemoryTransport} keeps the status line, header lines and body.
        """
        transport = MemoryTransport()
        transport.sendStatus("1.1", 200, "OK")
        transport.sendHeader(b"set-cookie", b"a=1", False)
        transport.sendHeader(b"set-cookie", b"b=2", False)
        transport.write(b"hello, ")
        transport.write(b"world")
        transport.finish()

        self.assertEqual(transport.statusLine, b"HTTP/1.1 200 OK")
        self.assertEqual(
            transport.headers.rawHeaders,
            ((b"set-cookie", b"a=1"), (b"set-cookie", b"b=2")),
        )
        self.assertEqual(transport.body, b"hello, world")
        self.assertTrue(transport.finished)

    def test_sendHeaderReplace(self) -> None:
        """
        L{MemoryTransport.sendHeader} with C{replace} discards earlier lines
        with the same name.
        """
        transport = MemoryTransport()
        transport.sendHeader(b"location", b"/a", False)
        transport.sendHeader(b"location", b"/b", True)

        self.assertEqual(transport.headers.rawHeaders, ((b"location", b"/b"),))

    def test_writeAfterFinish(self) -> None:
        """
        L{MemoryTransport.write} raises L{RuntimeError} after
        L{MemoryTransport.finish}.
        """
        transport = MemoryTransport()
        transport.finish()

        self.assertRaises(RuntimeError, transport.write, b"x")


class StreamTransportTests(TestCase):
    """
    Tests for L{StreamTransport}.
    """

    def test_interface(self) -> None:
        """
        L{StreamTransport} implements L{IResponseTransport}.
        """
        self.assertProvides(IResponseTransport, StreamTransport(BytesIO()))

    def test_clientVersion(self) -> None:
        """
        L{StreamTransport.clientVersion} reads C{SERVER_PROTOCOL} from the
        environment.
        """
        self.assertIsNone(StreamTransport(BytesIO(), environ={}).clientVersion())
        self.assertEqual(
            StreamTransport(
                BytesIO(), environ={"SERVER_PROTOCOL": "HTTP/1.1"}
            ).clientVersion(),
            "1.1",
        )

    def test_writesResponse(self) -> None:
        """
        L{StreamTransport} writes the status line, one line per header value,
        a blank line and the body.
        """
        stream = BytesIO()
        transport = StreamTransport(stream)
        transport.sendStatus("1.1", 302, "Found")
        transport.sendHeader(b"location", b"/login", False)
        transport.sendHeader(b"set-cookie", b"a=1", False)
        transport.sendHeader(b"set-cookie", b"b=2", False)

        self.assertEqual(stream.getvalue(), b"")

        transport.write(b"moved")
        transport.finish()

        self.assertEqual(
            stream.getvalue(),
            b"HTTP/1.1 302 Found\r\n"
            b"Location: /login\r\n"
            b"Set-Cookie: a=1\r\n"
            b"Set-Cookie: b=2\r\n"
            b"\r\n"
            b"moved",
        )

    def test_finishWithoutBody(self) -> None:
        """
        L{StreamTransport.finish} writes the head if no body was written.
        """
        stream = BytesIO()
        transport = StreamTransport(stream)
        transport.sendStatus("1.0", 204, "No Content")
        transport.finish()

        self.assertEqual(stream.getvalue(), b"HTTP/1.0 204 No Content\r\n\r\n")

    def test_headerAfterHead(self) -> None:
        """
        L{StreamTransport} raises L{RuntimeError} for headers or status sent
        after the head was written.
        """
        transport = StreamTransport(BytesIO())
        transport.write(b"x")

        self.assertRaises(
            RuntimeError, transport.sendHeader, b"a", b"1", False
        )
        self.assertRaises(RuntimeError, transport.sendStatus, "1.1", 200, "OK")


class RequestTransportTests(TestCase):
    """
    Tests for L{RequestTransport}.
    """

    def request(self) -> Request:
        request = Request(DummyChannel(), False)
        request.clientproto = b"HTTP/1.1"
        return request

    def test_interface(self) -> None:
        """
        L{RequestTransport} implements L{IResponseTransport}.
        """
        self.assertProvides(
            IResponseTransport, RequestTransport(request=self.request())
        )

    def test_initInvalidRequest(self) -> None:
        """
        L{RequestTransport} requires an L{IRequest}.
        """
        self.assertRaises(TypeError, RequestTransport, request=object())

    def test_clientVersion(self) -> None:
        """
        L{RequestTransport.clientVersion} is derived from the request's
        C{clientproto}.
        """
        request = self.request()
        self.assertEqual(RequestTransport(request).clientVersion(), "1.1")

        request.clientproto = b"HTTP/1.0"
        self.assertEqual(RequestTransport(request).clientVersion(), "1.0")

    def test_sendStatus(self) -> None:
        """
        L{RequestTransport.sendStatus} sets the request's response code and
        message.
        """
        request = self.request()
        RequestTransport(request).sendStatus("1.1", 404, "Gone Fishing")

        self.assertEqual(request.code, 404)
        self.assertEqual(request.code_message, b"Gone Fishing")

    def test_sendHeaderAppends(self) -> None:
        """
        L{RequestTransport.sendHeader} without C{replace} adds to the
        request's response headers.
        """
        request = self.request()
        request.responseHeaders = Headers()
        transport = RequestTransport(request)
        transport.sendHeader(b"set-cookie", b"a=1", False)
        transport.sendHeader(b"set-cookie", b"b=2", False)

        self.assertEqual(
            request.responseHeaders.getRawHeaders(b"set-cookie"),
            [b"a=1", b"b=2"],
        )

    def test_sendHeaderReplace(self) -> None:
        """
        L{RequestTransport.sendHeader} with C{replace} discards earlier
        values.
        """
        request = self.request()
        transport = RequestTransport(request)
        transport.sendHeader(b"location", b"/a", False)
        transport.sendHeader(b"location", b"/b", True)

        self.assertEqual(
            request.responseHeaders.getRawHeaders(b"location"), [b"/b"]
        )
