""" Helpers used by :func:`sioframe.protocol.wire.decode` to pick apart the
    text following the message type prefix. Each helper consumes a leading
    portion of the text it is given and returns whatever remains, so that
    the decoder can chain them together.
"""

from __future__ import annotations

import enum
from typing import Tuple

from .errors import WrongPacket


def namespace(text: str) -> Tuple[str, str]:
    """ Split an optional leading namespace off of *text*. A namespace starts
        with a slash and runs up to the first comma, or to the end of the text
        if there is no comma; the comma itself is discarded. Returns the
        namespace, which is empty if none is present, and the remaining text.
    """

    if text[:1] != "/":
        return "", text

    found, _, rest = text.partition(",")
    return found, rest


def ack_id(text: str) -> Tuple[int, str]:
    """ Parse the acknowledgement id at the start of *text*. The id is the
        decimal number running up to the first '[' character; the remaining
        text starts with that bracket.

        A missing bracket raises :class:`WrongPacket`. Digits that do not
        parse as a non-negative integer raise :class:`ValueError`.
    """

    if text == "":
        raise WrongPacket("missing ack id")

    position = text.find("[")
    if position == -1:
        raise WrongPacket("missing '[' after ack id: " + repr(text[:100]))

    digits = text[:position]

    # int() alone would also accept signs, whitespace and underscores.

    if not (digits.isascii() and digits.isdigit()):
        raise ValueError("invalid literal for ack id: " + repr(digits))

    return int(digits), text[position:]


class State(enum.Enum):
    AWAIT_OPEN_QUOTE = enum.auto()
    IN_METHOD = enum.auto()
    AWAIT_COMMA = enum.auto()
    IN_ARGS = enum.auto()


def method(text: str) -> Tuple[str, str]:
    """ Extract the method name and the args from an event body of the form
        ``["method",args]``. The method is the raw text between the first
        pair of double quotes; the args are everything after the comma that
        follows the method, minus the final character (the closing bracket).

        The body is scanned one character at a time:

        * AWAIT_OPEN_QUOTE: anything up to the first quote is skipped.
        * IN_METHOD: the method name runs up to the second quote.
        * AWAIT_COMMA: a third quote before the comma is an error; anything
          else is skipped until the comma.
        * IN_ARGS: the rest of the text, which must not be empty.

        Running off the end of the text in any state but IN_ARGS raises
        :class:`WrongPacket`.
    """

    state = State.AWAIT_OPEN_QUOTE
    start = end = 0

    for index, character in enumerate(text):
        if state is State.AWAIT_OPEN_QUOTE:
            if character == '"':
                start = index + 1
                state = State.IN_METHOD

        elif state is State.IN_METHOD:
            if character == '"':
                end = index
                state = State.AWAIT_COMMA

        elif state is State.AWAIT_COMMA:
            if character == '"':
                raise WrongPacket("unexpected quote after method: " + repr(text[:100]))
            if character == ',':
                start_args = index + 1
                state = State.IN_ARGS
                break

    if state is State.AWAIT_OPEN_QUOTE:
        raise WrongPacket("missing method: " + repr(text[:100]))

    if state is State.IN_METHOD:
        raise WrongPacket("unterminated method: " + repr(text[:100]))

    if state is State.AWAIT_COMMA:
        raise WrongPacket("missing ',' after method: " + repr(text[:100]))

    if start_args >= len(text):
        raise WrongPacket("missing args after method: " + repr(text[:100]))

    return text[start:end], text[start_args:-1]


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
