"""
Mongo Data API SDK - A MongoDB-like client for the Atlas Data API.

Every operation is a single stateless HTTPS request, which makes the client
suitable for serverless functions and edge runtimes where a driver
connection is not an option.

Supports:
- find_one, find, insert_one, insert_many, update_one, update_many,
  replace_one, delete_one, delete_many, aggregate
- Raw action calls with optional typed results
- API key, email/password, custom JWT and bearer token authentication
- Extended JSON (BSON types such as ObjectId survive the round trip)
- Pluggable httpx transports

Usage:
    from mongo_data_api import ApiKeyAuth, MongoClient

    client = MongoClient(
        endpoint="https://data.mongodb-api.com/app/<app-id>/endpoint/data/v1",
        data_source="Cluster0",
        auth=ApiKeyAuth(api_key="..."),
    )
    result = await client.db("myapp").collection("users").find_one({"name": "Alice"})
    if result.error:
        print(result.error.code, result.error.message)
    else:
        print(result.data)
"""

from bson import ObjectId

from .auth import (
    ApiKeyAuth,
    AuthMethod,
    AuthOptions,
    BearerTokenAuth,
    CustomJwtAuth,
    EmailPasswordAuth,
)
from .client import Database, MongoClient
from .collection import Collection
from .config import ClientConfig
from .connection.context import ConnectionContext, Fetch, Transport
from .connection.http import ActionInvoker
from .protocol.action import ActionName, ActionRequest
from .protocol.ejson import MEDIA_TYPE, decode as ejson_decode, encode as ejson_encode
from .types import (
    DataAPIResponse,
    DeleteResponse,
    InsertManyResponse,
    InsertOneResponse,
    UpdateResponse,
)
from .exceptions import (
    ConfigurationError,
    DataAPIError,
    InvalidAuthError,
    MongoDataAPIError,
    TransportConfigurationError,
)

__version__ = "0.3.0"
__all__ = [
    # Client
    "MongoClient",
    "Database",
    "Collection",
    "ClientConfig",
    # Auth
    "AuthMethod",
    "AuthOptions",
    "ApiKeyAuth",
    "EmailPasswordAuth",
    "CustomJwtAuth",
    "BearerTokenAuth",
    # Connection
    "ConnectionContext",
    "ActionInvoker",
    "Fetch",
    "Transport",
    # Protocol
    "ActionName",
    "ActionRequest",
    "MEDIA_TYPE",
    "ejson_encode",
    "ejson_decode",
    "ObjectId",
    # Response Types
    "DataAPIResponse",
    "InsertOneResponse",
    "InsertManyResponse",
    "UpdateResponse",
    "DeleteResponse",
    # Exceptions
    "MongoDataAPIError",
    "DataAPIError",
    "ConfigurationError",
    "InvalidAuthError",
    "TransportConfigurationError",
]
