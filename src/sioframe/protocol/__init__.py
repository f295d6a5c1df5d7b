from . import errors
from . import kind
from . import payload
from . import message
from . import parse
from . import wire
from . import factory

from .errors import ProtocolError, WrongMessageType, WrongPacket
from .kind import Kind
from .message import Message
from .wire import encode, must_encode, decode


"""
sioframe Protocol Layer
=======================

This package defines the text framing used by real-time duplex transports
to carry connection lifecycle signals and event messages over a single
character stream. It provides the message structure, the wire codec, and
construction utilities.

The protocol layer MUST NOT depend on any transport implementation
(e.g. WebSocket, HTTP long-polling, etc).

---------------------------------------------------------------------

Layer Architecture Overview
---------------------------

User Code
    │
    ▼
Constructors (factory.py)
    One function per message kind
    - open() / close() / ping() / pong() / empty()
    - emit() / ack_request() / ack_response() / reply()
    Only sets the fields relevant to the kind

    │
    ▼
Wire Codec (wire.py)
    Maps Message <-> wire text
    - encode() / must_encode()
    - decode(), built on the helpers in parse.py

    │
    ▼
Message Model (message.py)
    Immutable protocol data structure
    - Message
    Args are opaque, pre-serialized JSON text

    │
    ▼
Kind Vocabulary (kind.py)
    Message kinds and their wire prefixes
    Prevents string drift across the system

    │
    ▼
Structured Args (payload.py)
    Optional Python values <-> args text

---------------------------------------------------------------------

Wire Grammar
------------

    open            0[<namespace>,]<args>
    close           1[<namespace>]
    ping            2[<namespace>]
    pong            3[<namespace>]
    empty           40[<namespace>]
    emit            42[<namespace>,]["<method>",<args>]
    ack request     42[<namespace>,]<ack id>["<method>",<args>]
    ack response    43[<namespace>,]<ack id>[<args>]

Each call handles exactly one frame; anything that moves frames around is
the business of the transport.

---------------------------------------------------------------------
"""


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
