"""
Type definitions for Mongo Data API SDK responses.

Every operation resolves to a ``DataAPIResponse`` holding either the
unwrapped payload or a ``DataAPIError``, never both.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Generic, NotRequired, TypedDict, TypeVar

from .exceptions import DataAPIError

T = TypeVar("T")

# Type aliases for clarity
Document = Mapping[str, Any]
Filter = Mapping[str, Any]
Update = Mapping[str, Any] | Sequence[Mapping[str, Any]]
Projection = Mapping[str, Any]
Sort = Mapping[str, Any]
Pipeline = Sequence[Mapping[str, Any]]


@dataclass(frozen=True)
class DataAPIResponse(Generic[T]):
    """
    Outcome of a Data API call.

    Attributes:
        data: The unwrapped payload (absent on error)
        error: The error reported by the Data API (absent on success)

    Check ``error`` before reading ``data``: a ``find_one`` that matched
    nothing is a success with ``data`` set to ``None``.
    """

    data: T | None = None
    error: DataAPIError | None = None

    def __post_init__(self) -> None:
        if self.data is not None and self.error is not None:
            raise ValueError("DataAPIResponse cannot carry both data and an error")

    @property
    def is_ok(self) -> bool:
        """Check if the call succeeded."""
        return self.error is None

    @property
    def is_error(self) -> bool:
        """Check if the call failed."""
        return self.error is not None

    def unwrap(self) -> T | None:
        """Return ``data``, raising the carried error if the call failed."""
        if self.error is not None:
            raise self.error
        return self.data


class InsertOneResponse(TypedDict):
    """Payload of ``insertOne``."""

    insertedId: Any


class InsertManyResponse(TypedDict):
    """Payload of ``insertMany``."""

    insertedIds: list[Any]


class UpdateResponse(TypedDict):
    """Payload of ``updateOne``, ``updateMany`` and ``replaceOne``."""

    matchedCount: int
    modifiedCount: int
    upsertedId: NotRequired[Any]


class DeleteResponse(TypedDict):
    """Payload of ``deleteOne`` and ``deleteMany``."""

    deletedCount: int
