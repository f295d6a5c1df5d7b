"""Codec exceptions.

Ack id digits that fail to parse are not represented here; they surface as
the plain :class:`ValueError` raised by :func:`int`.
"""

from __future__ import annotations


class ProtocolError(Exception):
    """Base class for all codec errors."""


class WrongMessageType(ProtocolError):
    """The message type prefix is absent, unrecognized, or not a Kind."""


class WrongPacket(ProtocolError):
    """The frame body is structurally malformed."""


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
