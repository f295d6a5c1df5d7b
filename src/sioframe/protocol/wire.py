""" Translation between :class:`Message` instances and their wire text.
    Both directions are pure functions: nothing is cached between calls, and
    a failure in either direction raises without producing partial output.
"""

from __future__ import annotations

import logging

from .. import json
from . import parse
from .errors import ProtocolError, WrongPacket
from .kind import Kind, prefix_of
from .message import Message


log = logging.getLogger(__name__)

_BODYLESS = (Kind.EMPTY, Kind.PING, Kind.PONG)
_TERMINAL = (Kind.CLOSE, Kind.PING, Kind.PONG, Kind.EMPTY)


def encode(msg: Message) -> str:
    """ Serialize a :class:`Message` to wire text.

        Layout:
            <prefix>[<namespace>[,]][<ack id>][<body>]

        The *args* are concatenated as-is, they are never re-serialized;
        the caller is responsible for them being the JSON text the wire
        expects for this kind of message.
    """

    kind = msg.kind
    result = prefix_of(kind)

    comma = False
    if msg.namespace:
        result += msg.namespace
        comma = True

    if kind in _BODYLESS:
        return result

    if kind.has_ack:
        ack_id = msg.ack_id
        if type(ack_id) is not int or ack_id < 0:
            raise WrongPacket("ack id must be a non-negative integer: " + repr(ack_id))

        if comma:
            result += ","
            comma = False
        result += str(ack_id)

    if kind is Kind.OPEN or kind is Kind.CLOSE:
        if comma:
            result += ","
        return result + msg.args

    if kind is Kind.ACK_RESPONSE:
        if comma:
            result += ","
        return result + "[" + msg.args + "]"

    try:
        method = json.dumps(msg.method).decode()
    except (TypeError, ValueError) as e:
        raise WrongPacket("method cannot be quoted: " + repr(msg.method)) from e

    if comma:
        result += ","

    return result + "[" + method + "," + msg.args + "]"


def must_encode(msg: Message) -> str:
    """ The same as :func:`encode`, for callers that can guarantee *msg* is
        well formed. Any failure is a bug in the caller, and is escalated as
        a :class:`RuntimeError` rather than a recoverable protocol error.
    """

    try:
        return encode(msg)
    except (ProtocolError, TypeError) as e:
        log.error("cannot encode %r: %s", msg, e)
        raise RuntimeError("must_encode() failed: " + str(e)) from e


def decode(frame: str) -> Message:
    """ Deserialize wire text to a :class:`Message`. Malformed text raises
        :class:`WrongMessageType` or :class:`WrongPacket`; ack id digits that
        cannot be parsed raise :class:`ValueError`. A failed frame cannot be
        salvaged by retrying, the caller should discard it.
    """

    try:
        return _decode(frame)
    except (ProtocolError, ValueError) as e:
        log.debug("malformed frame %r: %s", frame[:100], e)
        raise


def _decode(frame: str) -> Message:

    kind, rest = Kind.classify(frame)
    namespace, rest = parse.namespace(rest)

    if kind in _TERMINAL:
        return Message(kind, namespace, source=frame)

    if kind is Kind.OPEN:
        return Message(kind, namespace, args=rest, source=frame)

    try:
        ack_id, rest = parse.ack_id(rest)
    except (WrongPacket, ValueError):
        if kind is Kind.ACK_RESPONSE:
            raise

        # No ack id, so this is a plain emit. The body is taken from the
        # original frame, just past the prefix; the namespace, if any, is not
        # stripped again here.

        log.debug("no ack id in %r, decoding as emit", frame[:100])
        ack_id = None
        rest = frame[2:]
    else:
        if kind is Kind.EMIT:
            kind = Kind.ACK_REQUEST

    if kind is Kind.ACK_RESPONSE:
        if not rest.endswith("]"):
            raise WrongPacket("unterminated ack response: " + repr(frame[:100]))
        return Message(kind, namespace, ack_id, args=rest[1:-1], source=frame)

    method, args = parse.method(rest)
    return Message(kind, namespace, ack_id, method, args, source=frame)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
