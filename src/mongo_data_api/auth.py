"""
Authentication methods for the Data API.

Each supported method is its own model, and the model's class is the tag:
the client never guesses the method from the shape of an object. Plain
mappings are still accepted and validated into exactly one method.

Usage:
    MongoClient(endpoint, "Cluster0", ApiKeyAuth(api_key="..."))
    MongoClient(endpoint, "Cluster0", {"email": "me@example.com", "password": "..."})
"""

import logging
from collections.abc import Mapping
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, SecretStr, TypeAdapter, ValidationError, field_validator

from .exceptions import InvalidAuthError

logger = logging.getLogger(__name__)


class AuthMethod(BaseModel):
    """Base class for Data API authentication methods."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    method: ClassVar[str] = ""

    @field_validator("*")
    @classmethod
    def _require_value(cls, value: Any) -> Any:
        raw = value.get_secret_value() if isinstance(value, SecretStr) else value
        if not isinstance(raw, str) or not raw.strip():
            raise ValueError("must be a non-empty string")
        return value

    def headers(self) -> dict[str, str]:
        """Request headers that carry these credentials."""
        raise NotImplementedError


class ApiKeyAuth(AuthMethod):
    """Authenticate with a Data API key."""

    method: ClassVar[str] = "api_key"

    api_key: SecretStr = Field(alias="apiKey")

    def headers(self) -> dict[str, str]:
        return {"apiKey": self.api_key.get_secret_value()}


class EmailPasswordAuth(AuthMethod):
    """Authenticate with an App Services email/password user."""

    method: ClassVar[str] = "email_password"

    email: str
    password: SecretStr

    def headers(self) -> dict[str, str]:
        return {"email": self.email, "password": self.password.get_secret_value()}


class CustomJwtAuth(AuthMethod):
    """Authenticate with a custom JWT, passed through as-is."""

    method: ClassVar[str] = "custom_jwt"

    jwt_token_string: SecretStr = Field(alias="jwtTokenString")

    def headers(self) -> dict[str, str]:
        return {"jwtTokenString": self.jwt_token_string.get_secret_value()}


class BearerTokenAuth(AuthMethod):
    """Authenticate with a user access token."""

    method: ClassVar[str] = "bearer_token"

    bearer_token: SecretStr = Field(alias="bearerToken")

    def headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.bearer_token.get_secret_value()}"}


AuthOptions = ApiKeyAuth | EmailPasswordAuth | CustomJwtAuth | BearerTokenAuth

_auth_adapter: TypeAdapter[AuthOptions] = TypeAdapter(AuthOptions)


def resolve_auth(auth: AuthOptions | Mapping[str, Any]) -> AuthOptions:
    """
    Resolve caller auth options to exactly one authentication method.

    Args:
        auth: An auth model, or a mapping such as ``{"apiKey": "..."}``,
              ``{"email": "...", "password": "..."}``,
              ``{"jwtTokenString": "..."}`` or ``{"bearerToken": "..."}``
              (snake_case keys work too)

    Returns:
        The matching auth model

    Raises:
        InvalidAuthError: If the options match no supported method, or more than one
    """
    if isinstance(auth, (ApiKeyAuth, EmailPasswordAuth, CustomJwtAuth, BearerTokenAuth)):
        return auth

    if not isinstance(auth, Mapping):
        raise InvalidAuthError(f"Invalid auth options: expected an auth method, got {type(auth).__name__}")

    try:
        return _auth_adapter.validate_python(dict(auth))
    except ValidationError as e:
        # Keys only: values may be secrets
        logger.debug(f"Rejected auth options with keys {sorted(map(str, auth))}")
        raise InvalidAuthError(
            f"Invalid auth options: keys {sorted(map(str, auth))} match none of "
            "apiKey, email + password, jwtTokenString, bearerToken"
        ) from e
