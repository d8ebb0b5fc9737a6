"""
Data API Action Protocol Implementation.

Every Data API call is a POST to ``<endpoint>/action/<name>`` whose body names
the data source, database and collection alongside the action's own fields.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from . import ejson as ejson_module


def _strip_none_values(data: Mapping[str, Any]) -> dict[str, Any]:
    """
    Drop top-level keys whose value is ``None``.

    The Data API answers ``400 Bad Request`` when an optional top-level field
    such as ``projection`` or ``upsert`` is sent as ``null``. Nested documents
    are left untouched since ``null`` is a meaningful filter value there.
    """
    return {k: v for k, v in data.items() if v is not None}


@dataclass
class ActionRequest:
    """
    Data API request message.

    Attributes:
        action: Action name (findOne, insertMany, aggregate, ...)
        data_source: Target data source (cluster) name
        database: Target database name
        collection: Target collection name
        body: Action-specific fields (filter, projection, document, ...)
        label: Optional label sent as the operation name header
    """

    action: str
    data_source: str
    database: str
    collection: str
    body: dict[str, Any] = field(default_factory=dict)
    label: str | None = None

    @property
    def path(self) -> str:
        """URL path of the action, relative to the endpoint."""
        return f"/action/{self.action}"

    def to_dict(self) -> dict[str, Any]:
        """
        Build the request body.

        Scope identifiers come first so that a raw ``call_api`` body can
        override them. ``None`` values are then dropped.
        """
        return _strip_none_values(
            {
                "collection": self.collection,
                "database": self.database,
                "dataSource": self.data_source,
                **self.body,
            }
        )

    def to_ejson(self) -> str:
        """Serialize the body to Extended JSON."""
        return ejson_module.encode(self.to_dict())


def unwrap_document(payload: Any) -> Any:
    """Unwrap a ``{"document": ...}`` envelope. A missing document is ``None``."""
    if isinstance(payload, Mapping):
        return payload.get("document")
    return None


def unwrap_documents(payload: Any) -> list[Any]:
    """Unwrap a ``{"documents": [...]}`` envelope. A missing list is empty."""
    if isinstance(payload, Mapping):
        documents = payload.get("documents")
        if isinstance(documents, list):
            return documents
    return []


# Data API action names as constants
class ActionName:
    """Data API action name constants."""

    # Read
    FIND_ONE = "findOne"
    FIND = "find"
    AGGREGATE = "aggregate"

    # Insert
    INSERT_ONE = "insertOne"
    INSERT_MANY = "insertMany"

    # Update
    UPDATE_ONE = "updateOne"
    UPDATE_MANY = "updateMany"
    REPLACE_ONE = "replaceOne"

    # Delete
    DELETE_ONE = "deleteOne"
    DELETE_MANY = "deleteMany"
