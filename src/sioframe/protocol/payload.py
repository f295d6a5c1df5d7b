"""Structured values to and from the opaque args text.

The codec proper never looks inside the args; this is an optional layer for
callers that would rather hand over Python values than pre-serialized JSON.
"""

from __future__ import annotations

from typing import Any, List

from .. import json
from .errors import WrongPacket


def pack(*values: Any) -> str:
    """Return the JSON array body, without brackets, holding *values*."""

    if not values:
        return ""

    # Serializing the list and dropping the outer brackets produces the same
    # text as joining the individual encodings with commas.

    encoded = json.dumps(list(values)).decode()
    return encoded[1:-1]


def unpack(args: str) -> List[Any]:
    """Return the values held in an args string produced by :func:`pack`."""

    if args == "":
        return []

    try:
        values = json.loads("[" + args + "]")
    except json.DecodeError as e:
        raise WrongPacket("args are not valid JSON: " + repr(args[:100])) from e

    return values


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
