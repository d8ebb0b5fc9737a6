"""
Connection context for the Mongo Data API SDK.

Holds the resolved, immutable configuration shared by a client and every
database and collection created from it.
"""

import inspect
import logging
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

import httpx

from ..auth import AuthOptions, resolve_auth
from ..exceptions import ConfigurationError, TransportConfigurationError
from ..protocol.ejson import MEDIA_TYPE

logger = logging.getLogger(__name__)

Fetch = Callable[[httpx.Request], Awaitable[httpx.Response]]
Transport = httpx.AsyncBaseTransport | Fetch


def client_fetch(transport: httpx.AsyncBaseTransport | None = None) -> Fetch:
    """
    Build a fetch callable backed by a short-lived ``httpx.AsyncClient``.

    A client is opened and closed around each request, so there is nothing
    to release afterwards.

    Args:
        transport: httpx transport to send through. ``None`` uses httpx's
                   default network transport.
    """

    async def fetch(request: httpx.Request) -> httpx.Response:
        async with httpx.AsyncClient(transport=transport) as client:
            return await client.send(request)

    return fetch


def _is_async_callable(obj: Any) -> bool:
    if inspect.iscoroutinefunction(obj):
        return True
    call = getattr(type(obj), "__call__", None)
    return callable(obj) and inspect.iscoroutinefunction(call)


def resolve_fetch(transport: Any = None) -> Fetch:
    """
    Resolve the caller's transport option to a fetch callable.

    Args:
        transport: ``None`` for the default network transport, an
                   ``httpx.AsyncBaseTransport`` (such as ``httpx.MockTransport``),
                   or an async callable taking an ``httpx.Request`` and
                   returning an ``httpx.Response``

    Raises:
        TransportConfigurationError: If the option is none of the above
    """
    if transport is None:
        return client_fetch()
    if isinstance(transport, httpx.AsyncBaseTransport):
        return client_fetch(transport)
    if _is_async_callable(transport):
        fetch: Fetch = transport
        return fetch
    raise TransportConfigurationError(
        f"No viable transport found: expected an httpx.AsyncBaseTransport or an async callable, "
        f"got {type(transport).__name__}"
    )


@dataclass(frozen=True)
class ConnectionContext:
    """
    Resolved connection settings.

    Attributes:
        endpoint: Data API base URL, without trailing slash
        data_source: Data source (cluster) name sent with every request
        headers: Content negotiation, auth and caller-supplied headers
        fetch: Callable that sends a request and returns its response
        auth_method: Name of the active authentication method
    """

    endpoint: str
    data_source: str
    headers: Mapping[str, str]
    fetch: Fetch
    auth_method: str

    @classmethod
    def build(
        cls,
        endpoint: str | httpx.URL,
        data_source: str,
        auth: AuthOptions | Mapping[str, Any],
        transport: Transport | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> "ConnectionContext":
        """
        Resolve construction options into a context.

        Nothing is sent over the network here.

        Args:
            endpoint: Data API URL, e.g.
                      "https://data.mongodb-api.com/app/<app-id>/endpoint/data/v1"
            data_source: Data source (cluster) name
            auth: Authentication method or mapping of auth options
            transport: Optional transport override (see ``resolve_fetch``)
            headers: Optional extra request headers

        Raises:
            ConfigurationError: If endpoint or data source is empty
            InvalidAuthError: If auth matches no supported method
            TransportConfigurationError: If no usable transport is found
        """
        url = str(endpoint).rstrip("/")
        if not url:
            raise ConfigurationError("An endpoint is required")
        if not data_source:
            raise ConfigurationError("A data source is required")

        fetch = resolve_fetch(transport)
        method = resolve_auth(auth)

        merged = httpx.Headers(headers or {})
        merged["Content-Type"] = MEDIA_TYPE
        merged["Accept"] = MEDIA_TYPE
        merged.update(method.headers())

        logger.debug(f"Data API context: endpoint={url} data_source={data_source} auth={method.method}")
        return cls(
            endpoint=url,
            data_source=data_source,
            headers=MappingProxyType(dict(merged.items())),
            fetch=fetch,
            auth_method=method.method,
        )

    def url_for(self, path: str) -> str:
        """Absolute URL of an endpoint path."""
        return f"{self.endpoint}{path}"
