"""Message kinds and their wire prefixes.

Keep these in one place to avoid stringly-typed message handling.
"""

from __future__ import annotations

from enum import Enum
from typing import Tuple

from .errors import WrongMessageType


OPEN = "0"
CLOSE = "1"
PING = "2"
PONG = "3"

# Two character prefixes all start with this one.
MESSAGE = "4"

EMPTY = "40"
COMMON = "42"
ACK = "43"


class Kind(Enum):
    """ The eight kinds of message that can appear on the wire. EMIT and
        ACK_REQUEST share a prefix; only the presence of an ack id tells
        them apart.
    """

    OPEN = "open"
    CLOSE = "close"
    PING = "ping"
    PONG = "pong"
    EMPTY = "empty"
    EMIT = "emit"
    ACK_REQUEST = "ack_request"
    ACK_RESPONSE = "ack_response"


    @property
    def prefix(self) -> str:
        return _PREFIXES[self]


    @property
    def has_ack(self) -> bool:
        return self in (Kind.ACK_REQUEST, Kind.ACK_RESPONSE)


    @classmethod
    def from_prefix(cls, prefix: str) -> "Kind":
        """ Return the :class:`Kind` for a complete wire *prefix*. The shared
            '42' prefix maps to :attr:`Kind.EMIT`.
        """

        try:
            return _KINDS[prefix]
        except KeyError:
            raise WrongMessageType("unrecognized message type: " + repr(prefix)) from None


    @classmethod
    def classify(cls, frame: str) -> Tuple["Kind", str]:
        """ Inspect the leading one or two characters of *frame* and return
            the matching kind along with the text that follows the prefix.
        """

        if frame == "":
            raise WrongMessageType("empty frame")

        head = frame[:1]

        if head == MESSAGE:
            if len(frame) == 1:
                raise WrongMessageType("truncated message type: " + repr(frame))
            head = frame[:2]

        return cls.from_prefix(head), frame[len(head):]


# end of class Kind


_PREFIXES = {
    Kind.OPEN: OPEN,
    Kind.CLOSE: CLOSE,
    Kind.PING: PING,
    Kind.PONG: PONG,
    Kind.EMPTY: EMPTY,
    Kind.EMIT: COMMON,
    Kind.ACK_REQUEST: COMMON,
    Kind.ACK_RESPONSE: ACK,
}

_KINDS = {
    OPEN: Kind.OPEN,
    CLOSE: Kind.CLOSE,
    PING: Kind.PING,
    PONG: Kind.PONG,
    EMPTY: Kind.EMPTY,
    COMMON: Kind.EMIT,
    ACK: Kind.ACK_RESPONSE,
}

if set(_PREFIXES) != set(Kind):
    raise RuntimeError("every Kind needs a wire prefix")


def prefix_of(kind: object) -> str:
    """ Return the wire prefix for *kind*. Anything that is not a
        :class:`Kind` member is rejected with :class:`WrongMessageType`.
    """

    if not isinstance(kind, Kind):
        raise WrongMessageType("not a message kind: " + repr(kind))

    return kind.prefix


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
