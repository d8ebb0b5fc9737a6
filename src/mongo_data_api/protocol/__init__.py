"""
Mongo Data API Protocol Module.

Implements the action request format of the Data API and its
Extended JSON serialization.
"""

from .action import ActionName, ActionRequest, unwrap_document, unwrap_documents
from .ejson import (
    MEDIA_TYPE,
    decode as ejson_decode,
    encode as ejson_encode,
)

__all__ = [
    # Actions
    "ActionName",
    "ActionRequest",
    "unwrap_document",
    "unwrap_documents",
    # Extended JSON
    "MEDIA_TYPE",
    "ejson_encode",
    "ejson_decode",
]
