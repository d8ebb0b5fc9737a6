"""
Mongo Data API SDK Connection Module.

Provides the resolved connection context and the HTTP action invoker.
"""

from .context import ConnectionContext, Fetch, Transport, client_fetch, resolve_fetch
from .http import ActionInvoker

__all__ = [
    "ActionInvoker",
    "ConnectionContext",
    "Fetch",
    "Transport",
    "client_fetch",
    "resolve_fetch",
]
