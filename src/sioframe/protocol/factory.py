"""Convenience constructors for protocol messages."""

from __future__ import annotations

from .errors import WrongPacket
from .kind import Kind
from .message import Message


def _namespace(namespace: str) -> str:
    if namespace and not namespace.startswith("/"):
        raise ValueError("namespace must start with '/': " + repr(namespace))
    return namespace


def open(args: str = "", namespace: str = "") -> Message:
    return Message(Kind.OPEN, _namespace(namespace), args=args)


def close(namespace: str = "") -> Message:
    return Message(Kind.CLOSE, _namespace(namespace))


def ping(namespace: str = "") -> Message:
    return Message(Kind.PING, _namespace(namespace))


def pong(namespace: str = "") -> Message:
    return Message(Kind.PONG, _namespace(namespace))


def empty(namespace: str = "") -> Message:
    return Message(Kind.EMPTY, _namespace(namespace))


def emit(method: str, args: str = "", namespace: str = "") -> Message:
    return Message(Kind.EMIT, _namespace(namespace), method=method, args=args)


def ack_request(method: str, ack_id: int, args: str = "", namespace: str = "") -> Message:
    return Message(Kind.ACK_REQUEST, _namespace(namespace), ack_id, method, args)


def ack_response(ack_id: int, args: str = "", namespace: str = "") -> Message:
    return Message(Kind.ACK_RESPONSE, _namespace(namespace), ack_id, args=args)


def reply(request: Message, args: str = "") -> Message:
    """Create the ack response answering an ack request."""

    if request.ack_id is None:
        raise WrongPacket("cannot reply to a message without an ack id")

    return Message(Kind.ACK_RESPONSE, request.namespace, request.ack_id, args=args)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
