"""
HTTP Action Invoker for the Mongo Data API SDK.

Provides the stateless request/response cycle behind every operation.
"""

import logging
from collections.abc import Callable
from typing import Any

import httpx

from ..exceptions import DataAPIError
from ..protocol import ejson as ejson_module
from ..protocol.action import ActionRequest
from ..types import DataAPIResponse
from .context import ConnectionContext

logger = logging.getLogger(__name__)

LABEL_HEADER = "X-Realm-Op-Name"

# Messages used when an error response carries no usable text
# https://www.mongodb.com/docs/atlas/api/data-api-resources/#error-codes
DEFAULT_ERROR_MESSAGES: dict[int, str] = {
    400: "Bad Request",
    401: "Unauthorized",
    404: "Not Found",
    500: "Internal Server Error",
}
GENERIC_ERROR_MESSAGE = "Data API Error"


def is_success_status(status_code: int) -> bool:
    """2xx and 3xx responses are successful."""
    return 200 <= status_code < 400


def error_message(response: httpx.Response) -> str:
    """
    Best-effort message for a failed response.

    Tries, in order: the ``error`` field of a JSON body, the raw body text,
    the status line's reason phrase, a default for well-known statuses.
    The raw text of a JSON object without a usable ``error`` is skipped.
    """
    try:
        payload = response.json()
    except ValueError:
        payload = None
    if isinstance(payload, dict):
        message = payload.get("error")
        if isinstance(message, str) and message:
            return message
    else:
        try:
            text = response.text
        except (UnicodeDecodeError, LookupError):
            text = ""
        if text.strip():
            return text

    if response.reason_phrase:
        return response.reason_phrase

    return DEFAULT_ERROR_MESSAGES.get(response.status_code, GENERIC_ERROR_MESSAGE)


class ActionInvoker:
    """
    Sends Data API actions and classifies their responses.

    This invoker is stateless - each call is independent, so one instance can
    serve concurrent calls.

    Remote failures never raise: any response outside 200-399 comes back as
    ``DataAPIResponse(error=DataAPIError(message, status))``. Exceptions from
    the transport itself (DNS failure, refused connection, timeouts) propagate
    unchanged.
    """

    def __init__(self, context: ConnectionContext):
        """
        Initialize the invoker.

        Args:
            context: Resolved connection settings
        """
        self.context = context

    def build_request(self, request: ActionRequest) -> httpx.Request:
        """Build the HTTP request for an action."""
        headers = httpx.Headers(self.context.headers)
        if request.label:
            # Replaces a caller default regardless of case
            headers[LABEL_HEADER] = request.label

        return httpx.Request(
            "POST",
            self.context.url_for(request.path),
            headers=headers,
            content=request.to_ejson(),
        )

    async def invoke(
        self,
        request: ActionRequest,
        unwrap: Callable[[Any], Any] | None = None,
    ) -> DataAPIResponse[Any]:
        """
        Send an action and return its outcome.

        Args:
            request: The action to send
            unwrap: Optional function extracting the payload from the
                    response envelope

        Returns:
            DataAPIResponse with the decoded (and unwrapped) payload, or the error
        """
        logger.debug(
            f"Data API {request.action} on {request.database}.{request.collection}"
            + (f" [{request.label}]" if request.label else "")
        )
        response = await self.context.fetch(self.build_request(request))

        if not is_success_status(response.status_code):
            error = DataAPIError(error_message(response), response.status_code)
            logger.warning(f"Data API {request.action} failed -> {error.code}: {error.message}")
            return DataAPIResponse(error=error)

        # Empty bodies (e.g. a bare redirect) decode to None
        data = ejson_module.decode(response.text) if response.content else None
        if unwrap is not None:
            data = unwrap(data)
        return DataAPIResponse(data=data)
