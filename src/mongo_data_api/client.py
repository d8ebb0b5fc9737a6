"""
MongoClient - Data API client.

Provides a MongoDB-like client whose operations are plain HTTPS requests to
the Atlas Data API, for runtimes without a driver connection (serverless
functions, edge workers, short-lived jobs).
"""

from collections.abc import Mapping
from typing import Any

import httpx

from .auth import AuthOptions
from .collection import Collection
from .config import ClientConfig
from .connection.context import ConnectionContext, Transport
from .connection.http import ActionInvoker

__all__ = ["MongoClient", "Database"]


class MongoClient:
    """
    Client for the MongoDB Atlas Data API.

    All requests use the ``application/ejson`` media type, so BSON values
    such as ``ObjectId`` survive the round trip.

    Example:
        client = MongoClient(
            endpoint="https://data.mongodb-api.com/app/<app-id>/endpoint/data/v1",
            data_source="Cluster0",
            auth=ApiKeyAuth(api_key="..."),
        )

        users = client.db("myapp").collection("users")
        result = await users.find_one({"email": "alice@example.com"})
        if result.error:
            ...
        user = result.data

    Construction fails immediately with ``InvalidAuthError`` or
    ``TransportConfigurationError`` when the options are unusable; nothing is
    sent over the network until an operation runs.
    """

    __slots__ = ("_context", "_invoker")

    def __init__(
        self,
        endpoint: str | httpx.URL,
        data_source: str,
        auth: AuthOptions | Mapping[str, Any],
        *,
        transport: Transport | None = None,
        headers: Mapping[str, str] | None = None,
    ):
        """
        Initialize the client.

        Args:
            endpoint: Data API URL, usually
                      "https://data.mongodb-api.com/app/<app-id>/endpoint/data/v1"
            data_source: Data source (cluster) name, as listed in the Atlas UI
            auth: Authentication method (``ApiKeyAuth``, ``EmailPasswordAuth``,
                  ``CustomJwtAuth``, ``BearerTokenAuth``) or an equivalent mapping
            transport: Optional ``httpx.AsyncBaseTransport`` or async callable
                       ``(httpx.Request) -> httpx.Response`` used to send requests
            headers: Optional extra headers sent with every request
        """
        self._context = ConnectionContext.build(
            endpoint,
            data_source,
            auth,
            transport=transport,
            headers=headers,
        )
        self._invoker = ActionInvoker(self._context)

    @classmethod
    def from_config(cls, config: ClientConfig, **kwargs: Any) -> "MongoClient":
        """Create a client from a ``ClientConfig``."""
        return cls(
            config.endpoint,
            config.data_source,
            config.auth,
            headers=kwargs.pop("headers", config.headers),
            **kwargs,
        )

    @classmethod
    def from_env(cls, prefix: str = ClientConfig.ENV_PREFIX, **kwargs: Any) -> "MongoClient":
        """
        Create a client from environment variables.

        See ``ClientConfig.from_env`` for the variables read.
        """
        return cls.from_config(ClientConfig.from_env(prefix), **kwargs)

    @property
    def context(self) -> ConnectionContext:
        """Get the resolved connection settings."""
        return self._context

    @property
    def invoker(self) -> ActionInvoker:
        """Get the action invoker shared by this client's collections."""
        return self._invoker

    @property
    def endpoint(self) -> str:
        """Get the Data API endpoint."""
        return self._context.endpoint

    @property
    def data_source(self) -> str:
        """Get the data source name."""
        return self._context.data_source

    def db(self, name: str) -> "Database":
        """
        Select a database within the data source.

        Args:
            name: Database name

        Returns:
            Database instance
        """
        return Database(name, self)

    def __getitem__(self, name: str) -> "Database":
        """
        Get a database by name using subscript notation.

        Example:
            db = client["myapp"]
        """
        return self.db(name)

    def __repr__(self) -> str:
        return f"MongoClient({self.endpoint!r}, data_source={self.data_source!r})"


class Database:
    """
    A database within a Data API data source.

    Example:
        db = client.db("myapp")
        users = db.collection("users")
        orders = db["orders"]
    """

    __slots__ = ("_name", "_client")

    def __init__(self, name: str, client: MongoClient):
        """
        Initialize a database.

        Args:
            name: Database name
            client: Parent client
        """
        if not isinstance(name, str) or not name:
            raise ValueError("Database name must be a non-empty string")
        self._name = name
        self._client = client

    @property
    def name(self) -> str:
        """Get the database name."""
        return self._name

    @property
    def client(self) -> MongoClient:
        """Get the parent client."""
        return self._client

    def collection(self, name: str) -> Collection[Any]:
        """
        Get a collection from the database.

        Args:
            name: Collection name

        Returns:
            Collection instance. Annotate the variable
            (``users: Collection[User] = db.collection("users")``) to type documents.
        """
        return Collection(name, self)

    def __getitem__(self, name: str) -> Collection[Any]:
        """
        Get a collection by name using subscript notation.

        Example:
            users = db["users"]
        """
        return self.collection(name)

    def __repr__(self) -> str:
        return f"Database({self._name!r})"
