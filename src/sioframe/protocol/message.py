""" A class representation of a single frame's worth of message, as seen
    on either side of the codec.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from . import payload
from .kind import Kind


@dataclass(frozen=True)
class Message:
    """ The :class:`Message` provides a very thin encapsulation of what it
        means to be a message on the wire. The *kind* determines which of
        the remaining fields are meaningful; the others are left at their
        defaults.

        The fields are largely in order of how they are represented on the
        wire: the *kind* prefix, the *namespace* (empty for the default
        namespace), the *ack_id* correlating a request with its response,
        the *method* naming the event, and the *args*. The *args* are opaque
        text, already serialized by the caller; the codec never parses or
        re-serializes them, so the caller owns their JSON correctness.

        :ivar source: The original wire text, set only on decoded messages.
            It is kept for diagnostics and ignored when comparing messages.
    """

    kind: Kind
    namespace: str = ""
    ack_id: Optional[int] = None
    method: str = ""
    args: str = ""
    source: Optional[str] = field(default=None, compare=False, repr=False)


    def values(self) -> list:
        """ Interpret the *args* as JSON and return the list of values. See
            :func:`sioframe.protocol.payload.unpack`.
        """

        return payload.unpack(self.args)


# end of class Message


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
