# -*- test-case-name: rejoinder.test.test_resource -*-
# Copyright (c) 2011-2021. See LICENSE for details.

"""
Serving L{HTTPResponse}s with L{twisted.web}.
"""

from typing import Any, Callable, List

from twisted.internet.defer import CancelledError, maybeDeferred
from twisted.logger import Logger
from twisted.python.failure import Failure
from twisted.web.iweb import IRequest
from twisted.web.resource import Resource
from twisted.web.server import NOT_DONE_YET

from ._response import HTTPResponse
from ._transport import RequestTransport


__all__ = ()


log = Logger()


ResponseHandler = Callable[[IRequest, HTTPResponse], Any]


class ResponseResource(Resource):
    """
    Leaf resource that lets a handler fill in an L{HTTPResponse} for each
    request, then sends it.

    The handler is called with the request and a response bound to it, and
    may return a L{Deferred}; the response is sent once it fires.
    If the handler fails, the failure is logged and, if nothing was sent yet,
    a C{500} response is sent instead.
    """

    isLeaf = True

    def __init__(self, handler: ResponseHandler) -> None:
        super().__init__()
        self._handler = handler

    def render(self, request: IRequest) -> bytes:
        response = HTTPResponse(transport=RequestTransport(request))

        requestFinished: List[bool] = [False]

        def _finish(result: object) -> None:
            requestFinished[0] = True

        request.notifyFinish().addBoth(_finish)

        d = maybeDeferred(self._handler, request, response)

        request.notifyFinish().addErrback(lambda _: d.cancel())

        def send(result: object) -> None:
            response.sendResponse()

        def failed(failure: Failure) -> None:
            if requestFinished[0]:
                if not failure.check(CancelledError):
                    log.failure(
                        "Unhandled error after the request finished",
                        failure,
                    )
                return

            log.failure("Unhandled error handling request", failure)

            if response.headersSent():
                request.loseConnection()
                return

            (
                HTTPResponse(statusCode=500, transport=response.transport)
                .setHeader("Content-Type", "text/plain; charset=utf-8")
                .setBody("Internal Server Error")
                .sendResponse()
            )

        d.addCallback(send)
        d.addErrback(failed)
        d.addErrback(
            lambda failure: log.failure(
                "Unhandled error writing response", failure
            )
        )

        return NOT_DONE_YET  # type: ignore[return-value]
