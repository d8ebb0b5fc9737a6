"""
Extended JSON Encoding/Decoding for the Data API Protocol.

The Data API speaks MongoDB Extended JSON (``application/ejson``). Plain JSON
cannot carry BSON scalar types losslessly, so values are wrapped in ``$``
keyed objects on the wire:

- ObjectId: ``{"$oid": "6193504e1be4ab27791c8133"}``
- Int64: ``{"$numberLong": "9007199254740993"}``
- Binary: ``{"$binary": {"base64": "...", "subType": "00"}}``
- datetime: ``{"$date": "2021-11-16T06:14:06.000Z"}``
- Decimal128: ``{"$numberDecimal": "1.10"}``

Encoding and decoding are delegated to ``bson.json_util`` from PyMongo.
"""

from __future__ import annotations

from typing import Any

from bson import json_util
from bson.binary import UuidRepresentation
from bson.json_util import JSONMode, JSONOptions

MEDIA_TYPE = "application/ejson"

# Relaxed mode keeps plain numbers and ISO dates readable while still
# tagging values that JSON would lose (Int64 beyond 2**53, Binary, ObjectId).
JSON_OPTIONS = JSONOptions(
    json_mode=JSONMode.RELAXED,
    tz_aware=True,
    uuid_representation=UuidRepresentation.STANDARD,
)


def encode(data: Any) -> str:
    """
    Encode data to an Extended JSON string.

    Args:
        data: Python object to encode (dicts, lists, BSON types)

    Returns:
        Extended JSON text
    """
    result: str = json_util.dumps(data, json_options=JSON_OPTIONS)
    return result


def decode(text: str | bytes) -> Any:
    """
    Decode Extended JSON text to Python objects.

    Accepts both canonical and relaxed Extended JSON.

    Args:
        text: Extended JSON text

    Returns:
        Decoded Python object

    Raises:
        ValueError: If the text is not valid JSON
    """
    return json_util.loads(text, json_options=JSON_OPTIONS)
