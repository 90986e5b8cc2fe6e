"""
JSON encoding and decoding of referral tags.

On the wire a tag is a bare JSON string holding its code.
"""

from __future__ import annotations

import json
import logging

from reftag.tags import RefTag, parse

logger = logging.getLogger(__name__)

type JSONValue = str | int | float | bool | None | list[JSONValue] | dict[str, JSONValue]


class DecodeError(ValueError):
    """Raised when a JSON value cannot be decoded into a referral tag."""


def encode(tag: RefTag) -> str:
    """Convert a tag to its JSON scalar."""
    return tag.string_tag


def decode(value: JSONValue) -> RefTag:
    """
    Decode a JSON value into a referral tag.

    Only string scalars are accepted. Any string decodes, since unknown codes
    become Unrecognized tags.

    Raises:
        DecodeError: If the value is not a string
    """
    if not isinstance(value, str):
        msg = "RefTag code must be a string."
        raise DecodeError(msg)
    return parse(value)


def to_json(tag: RefTag) -> str:
    """Serialize a tag to JSON text."""
    return json.dumps(encode(tag))


def from_json(text: str) -> RefTag:
    """Deserialize a tag from JSON text."""
    try:
        value = json.loads(text)
    except json.JSONDecodeError as e:
        logger.debug("Malformed ref tag JSON: %s", e)
        msg = f"Invalid JSON for RefTag: {e.msg}"
        raise DecodeError(msg) from e
    return decode(value)
