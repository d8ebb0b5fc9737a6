"""
Collection - Data API collection operations.

Each operation is a single stateless POST to the Data API. Results come back
as ``DataAPIResponse`` objects; remote failures are returned, not raised.
"""

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Generic, TypeVar, overload

from pydantic import TypeAdapter

from .exceptions import DataAPIError
from .protocol.action import ActionName, ActionRequest, unwrap_document, unwrap_documents
from .types import (
    DataAPIResponse,
    DeleteResponse,
    Filter,
    InsertManyResponse,
    InsertOneResponse,
    Pipeline,
    Projection,
    Sort,
    Update,
    UpdateResponse,
)

if TYPE_CHECKING:
    from .client import Database

TSchema = TypeVar("TSchema", bound=Mapping[str, Any])
T = TypeVar("T")

__all__ = ["Collection"]


class Collection(Generic[TSchema]):
    """
    A collection within a Data API database.

    Example:
        users = client.db("myapp").collection("users")

        result = await users.insert_one({"name": "Alice"})
        if result.error:
            print(result.error.code, result.error.message)

        user = (await users.find_one({"name": "Alice"})).data
        active = (await users.find({"status": "active"}, limit=10)).data

    Every operation accepts a keyword-only ``label``, sent to the Data API as
    the operation name header so calls can be told apart in its logs.
    """

    __slots__ = ("_name", "_database", "_invoker")

    def __init__(self, name: str, database: "Database"):
        """
        Initialize a collection.

        Args:
            name: Collection name
            database: Parent database
        """
        if not isinstance(name, str) or not name:
            raise ValueError("Collection name must be a non-empty string")
        self._name = name
        self._database = database
        self._invoker = database.client.invoker

    @property
    def name(self) -> str:
        """Get the collection name."""
        return self._name

    @property
    def full_name(self) -> str:
        """Get the full collection name (database.collection)."""
        return f"{self._database.name}.{self._name}"

    @property
    def database(self) -> "Database":
        """Get the parent database."""
        return self._database

    def _request(self, action: str, body: dict[str, Any], label: str | None) -> ActionRequest:
        return ActionRequest(
            action=action,
            data_source=self._invoker.context.data_source,
            database=self._database.name,
            collection=self._name,
            body=body,
            label=label,
        )

    async def find_one(
        self,
        filter: Filter | None = None,
        *,
        projection: Projection | None = None,
        sort: Sort | None = None,
        label: str | None = None,
    ) -> DataAPIResponse[TSchema]:
        """
        Find a single document.

        Args:
            filter: Query filter. Matches every document if omitted.
            projection: Fields to include or exclude
            sort: Sort expression deciding which match comes first
            label: Operation label

        Returns:
            The matching document, or ``None`` data when nothing matched
        """
        request = self._request(
            ActionName.FIND_ONE,
            {"filter": filter, "projection": projection, "sort": sort},
            label,
        )
        return await self._invoker.invoke(request, unwrap_document)

    async def find(
        self,
        filter: Filter | None = None,
        *,
        projection: Projection | None = None,
        sort: Sort | None = None,
        limit: int | None = None,
        skip: int | None = None,
        label: str | None = None,
    ) -> DataAPIResponse[list[TSchema]]:
        """
        Find documents matching a filter.

        Args:
            filter: Query filter. Matches every document if omitted.
            projection: Fields to include or exclude
            sort: Sort expression
            limit: Maximum number of documents (the Data API caps this at 50,000)
            skip: Number of matches to skip
            label: Operation label

        Returns:
            The matching documents, in server order
        """
        request = self._request(
            ActionName.FIND,
            {"filter": filter, "projection": projection, "sort": sort, "limit": limit, "skip": skip},
            label,
        )
        return await self._invoker.invoke(request, unwrap_documents)

    async def insert_one(
        self,
        document: TSchema,
        *,
        label: str | None = None,
    ) -> DataAPIResponse[InsertOneResponse]:
        """
        Insert a single document.

        Returns:
            ``{"insertedId": ...}``
        """
        request = self._request(ActionName.INSERT_ONE, {"document": document}, label)
        return await self._invoker.invoke(request)

    async def insert_many(
        self,
        documents: list[TSchema],
        *,
        label: str | None = None,
    ) -> DataAPIResponse[InsertManyResponse]:
        """
        Insert several documents.

        Returns:
            ``{"insertedIds": [...]}``
        """
        request = self._request(ActionName.INSERT_MANY, {"documents": documents}, label)
        return await self._invoker.invoke(request)

    async def update_one(
        self,
        filter: Filter,
        update: Update,
        *,
        upsert: bool | None = None,
        label: str | None = None,
    ) -> DataAPIResponse[UpdateResponse]:
        """
        Update the first document matching a filter.

        Args:
            filter: Query filter
            update: Update expression or pipeline
            upsert: Insert a document if nothing matches
            label: Operation label

        Returns:
            ``{"matchedCount", "modifiedCount"}`` plus ``"upsertedId"`` on upsert
        """
        request = self._request(
            ActionName.UPDATE_ONE,
            {"filter": filter, "update": update, "upsert": upsert},
            label,
        )
        return await self._invoker.invoke(request)

    async def update_many(
        self,
        filter: Filter,
        update: Update,
        *,
        upsert: bool | None = None,
        label: str | None = None,
    ) -> DataAPIResponse[UpdateResponse]:
        """Update every document matching a filter. Same result shape as ``update_one``."""
        request = self._request(
            ActionName.UPDATE_MANY,
            {"filter": filter, "update": update, "upsert": upsert},
            label,
        )
        return await self._invoker.invoke(request)

    async def replace_one(
        self,
        filter: Filter,
        replacement: TSchema,
        *,
        upsert: bool | None = None,
        label: str | None = None,
    ) -> DataAPIResponse[UpdateResponse]:
        """Replace the first document matching a filter. Same result shape as ``update_one``."""
        request = self._request(
            ActionName.REPLACE_ONE,
            {"filter": filter, "replacement": replacement, "upsert": upsert},
            label,
        )
        return await self._invoker.invoke(request)

    async def delete_one(
        self,
        filter: Filter,
        *,
        label: str | None = None,
    ) -> DataAPIResponse[DeleteResponse]:
        """Delete the first document matching a filter."""
        request = self._request(ActionName.DELETE_ONE, {"filter": filter}, label)
        return await self._invoker.invoke(request)

    async def delete_many(
        self,
        filter: Filter,
        *,
        label: str | None = None,
    ) -> DataAPIResponse[DeleteResponse]:
        """Delete every document matching a filter."""
        request = self._request(ActionName.DELETE_MANY, {"filter": filter}, label)
        return await self._invoker.invoke(request)

    async def aggregate(
        self,
        pipeline: Pipeline,
        *,
        label: str | None = None,
    ) -> DataAPIResponse[list[Any]]:
        """
        Run an aggregation pipeline.

        Args:
            pipeline: Aggregation stages
            label: Operation label

        Returns:
            The documents produced by the last stage
        """
        request = self._request(ActionName.AGGREGATE, {"pipeline": list(pipeline)}, label)
        response = await self._invoker.invoke(request)

        if response.data is None:
            return DataAPIResponse(error=response.error or DataAPIError("Unknown error", -1))
        return DataAPIResponse(data=unwrap_documents(response.data))

    @overload
    async def call_api(
        self,
        action: str,
        body: Mapping[str, Any] | None = None,
        *,
        return_type: None = None,
        label: str | None = None,
    ) -> DataAPIResponse[Any]: ...

    @overload
    async def call_api(
        self,
        action: str,
        body: Mapping[str, Any] | None = None,
        *,
        return_type: type[T],
        label: str | None = None,
    ) -> DataAPIResponse[T]: ...

    async def call_api(
        self,
        action: str,
        body: Mapping[str, Any] | None = None,
        *,
        return_type: type[Any] | None = None,
        label: str | None = None,
    ) -> DataAPIResponse[Any]:
        """
        Call a raw Data API action.

        The body is merged with the collection, database and data source
        names. No envelope is unwrapped.

        Args:
            action: Data API action name
            body: Action fields
            return_type: Optional Pydantic model, dataclass or other type the
                         payload is validated into
            label: Operation label

        Returns:
            The decoded response payload, or the error

        Usage:
            result = await collection.call_api("find", {"filter": {}, "limit": 1})

            class Counts(BaseModel):
                deletedCount: int

            result = await collection.call_api("deleteMany", {"filter": {}}, return_type=Counts)
        """
        response = await self._invoker.invoke(self._request(action, dict(body or {}), label))

        if return_type is not None and response.data is not None:
            return DataAPIResponse(data=TypeAdapter(return_type).validate_python(response.data))
        return response

    def __repr__(self) -> str:
        return f"Collection({self.full_name!r})"
