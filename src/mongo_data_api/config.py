"""
Client configuration for the Mongo Data API SDK.

Provides an immutable configuration container that can be loaded from
environment variables.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import ClassVar

from .auth import ApiKeyAuth, AuthOptions, BearerTokenAuth, CustomJwtAuth, EmailPasswordAuth
from .exceptions import ConfigurationError, InvalidAuthError


@dataclass(frozen=True)
class ClientConfig:
    """
    Immutable configuration for a Data API client.

    Used by ``MongoClient.from_config()`` and ``MongoClient.from_env()``.

    Attributes:
        endpoint: The Data API URL.
        data_source: The data source (cluster) name.
        auth: The authentication method.
        headers: Extra headers sent with every request.
    """

    ENV_PREFIX: ClassVar[str] = "MONGO_DATA_API_"

    endpoint: str
    data_source: str
    auth: AuthOptions
    headers: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def from_env(cls, prefix: str = ENV_PREFIX, environ: Mapping[str, str] | None = None) -> ClientConfig:
        """
        Load configuration from environment variables.

        Reads ``<prefix>ENDPOINT`` and ``<prefix>DATA_SOURCE``, plus exactly one
        credential set:

        - ``<prefix>API_KEY``
        - ``<prefix>EMAIL`` and ``<prefix>PASSWORD``
        - ``<prefix>JWT_TOKEN``
        - ``<prefix>BEARER_TOKEN``

        Args:
            prefix: Variable name prefix
            environ: Mapping to read instead of ``os.environ``

        Raises:
            ConfigurationError: If a required variable is missing
            InvalidAuthError: If more than one credential set is present
        """
        env = os.environ if environ is None else environ

        def get(name: str) -> str | None:
            return env.get(f"{prefix}{name}") or None

        endpoint = get("ENDPOINT")
        data_source = get("DATA_SOURCE")
        if not endpoint or not data_source:
            raise ConfigurationError(f"{prefix}ENDPOINT and {prefix}DATA_SOURCE must be set")

        candidates: list[AuthOptions] = []
        if api_key := get("API_KEY"):
            candidates.append(ApiKeyAuth(api_key=api_key))
        email, password = get("EMAIL"), get("PASSWORD")
        if email and password:
            candidates.append(EmailPasswordAuth(email=email, password=password))
        elif email or password:
            raise ConfigurationError(f"{prefix}EMAIL and {prefix}PASSWORD must be set together")
        if jwt := get("JWT_TOKEN"):
            candidates.append(CustomJwtAuth(jwt_token_string=jwt))
        if bearer := get("BEARER_TOKEN"):
            candidates.append(BearerTokenAuth(bearer_token=bearer))

        if not candidates:
            raise ConfigurationError(
                f"No credentials found: set {prefix}API_KEY, {prefix}EMAIL and {prefix}PASSWORD, "
                f"{prefix}JWT_TOKEN or {prefix}BEARER_TOKEN"
            )
        if len(candidates) > 1:
            raise InvalidAuthError(
                f"Ambiguous credentials: found {', '.join(c.method for c in candidates)}; set only one"
            )

        return cls(endpoint=endpoint, data_source=data_source, auth=candidates[0])


__all__ = ["ClientConfig"]
