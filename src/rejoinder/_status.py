# -*- test-case-name: rejoinder.test.test_status -*-
# Copyright (c) 2011-2021. See LICENSE for details.

"""
HTTP status codes, reason phrases and status lines.
"""

from typing import Optional, Union

from twisted.web.http import RESPONSES

from ._interfaces import InvalidStatusCode


__all__ = ()


MIN_STATUS_CODE = 100
MAX_STATUS_CODE = 599

MIN_REDIRECT_CODE = 300
MAX_REDIRECT_CODE = 307

HTTP_10 = "1.0"
HTTP_11 = "1.1"

UNKNOWN_REASON_PHRASE = "Unknown Status"


def validateStatusCode(code: object) -> int:
    """
    Convert a numeric status code to an L{int}.

    Integers, integral floats and strings (or bytes) made of ASCII digits
    only are numeric.

    @raise InvalidStatusCode: If C{code} is not numeric or is not within
        C{[100, 599]}.
    """
    # bool is an int subclass, but True is not a status code.
    if isinstance(code, bool):
        raise InvalidStatusCode(code)

    if isinstance(code, int):
        value = code
    elif isinstance(code, float):
        if not code.is_integer():
            raise InvalidStatusCode(code)
        value = int(code)
    elif isinstance(code, (str, bytes)):
        # int() also takes signs, whitespace, underscores and non-ASCII digits.
        if not (code.isascii() and code.isdigit()):
            raise InvalidStatusCode(code)
        value = int(code)
    else:
        raise InvalidStatusCode(code)

    if not MIN_STATUS_CODE <= value <= MAX_STATUS_CODE:
        raise InvalidStatusCode(code)

    return value


def isRedirectCode(code: int) -> bool:
    return MIN_REDIRECT_CODE <= code <= MAX_REDIRECT_CODE


def reasonPhraseForCode(code: int) -> str:
    """
    The conventional reason phrase for a status code.
    """
    phrase = RESPONSES.get(code)
    if phrase is None:
        return UNKNOWN_REASON_PHRASE
    return phrase.decode("ascii")


def versionFromProtocol(protocol: Optional[Union[str, bytes]]) -> str:
    """
    Find the HTTP version for a protocol string such as C{b"HTTP/1.1"}.

    Clients that do not claim HTTP/1.1 are answered with HTTP/1.0.
    """
    if isinstance(protocol, bytes):
        protocol = protocol.decode("ascii", "replace")

    if protocol is not None and protocol.strip().upper() == "HTTP/1.1":
        return HTTP_11

    return HTTP_10


def renderStatusLine(version: str, code: int, phrase: str) -> bytes:
    """
    Render a status line, without the trailing line break.

    >>> renderStatusLine("1.1", 404, "Not Found")
    b'HTTP/1.1 404 Not Found'
    """
    return f"HTTP/{version} {code} {phrase}".encode("iso-8859-1")
