""" Python implementation of the sioframe text codec. This includes the
    translation of messages to and from their wire text, and helpers for
    constructing messages and their arguments.
"""

# Utility components.

from . import json

# Submodules used by multiple other components.

from . import protocol

# Primary public-facing interfaces.

from .protocol import Kind, Message
from .protocol import ProtocolError, WrongMessageType, WrongPacket
from .protocol import encode, must_encode, decode

factory = protocol.factory
payload = protocol.payload

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
