"""Decoding of response bodies into JSON values.

:func:`decode_json` is used for bodies read from the network and for bodies
read back from the cache.  It never returns a partial or default value: an
empty body, malformed JSON, undecodable bytes and the literal ``null`` all
raise :class:`~contentful_core.exceptions.DecodeError`.
"""

from __future__ import annotations

import json
from typing import Any, Union

from contentful_core.exceptions import DecodeError


def decode_json(body: Union[str, bytes]) -> Any:
    """Parse *body* as JSON.

    Args:
        body: Raw response body.

    Returns:
        The decoded value, typically a ``dict`` or ``list``.

    Raises:
        DecodeError: If the body is empty, is not valid JSON, cannot be
            decoded as text, or is the JSON literal ``null``.
    """
    if isinstance(body, bytes):
        try:
            text = body.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise DecodeError(str(exc), code="encoding") from exc
    else:
        text = body

    if not text.strip():
        raise DecodeError("Response body is empty", code="empty")

    try:
        result = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DecodeError(exc.msg, code="syntax", position=exc.pos) from exc

    if result is None:
        raise DecodeError("Response body decoded to null", code="null")
    return result
