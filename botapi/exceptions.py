"""Exception hierarchy for the Telegram Bot API dispatcher.

Transport failures (:class:`requests.RequestException` and its subclasses)
and JSON decode errors on successful responses are not wrapped here; they
reach the caller unchanged.
"""

from typing import Any, Dict, Optional

import requests


class BotApiError(Exception):
    """Base class for every error raised by :mod:`botapi`."""


class UnknownEndpointError(BotApiError, AttributeError):
    """Raised when an operation name does not resolve to a whitelisted endpoint.

    Subclasses :class:`AttributeError` so that dynamic attribute dispatch on
    :class:`~botapi.client.TelegramBotApi` keeps ``hasattr`` / ``getattr``
    semantics intact.

    Attributes:
        name: The name exactly as the caller supplied it.
        endpoint: The camelCase form that was looked up.
    """

    def __init__(self, name: str, endpoint: Optional[str] = None) -> None:
        self.name = name
        self.endpoint = endpoint if endpoint is not None else name
        super().__init__(f"Unknown Telegram Bot API method: {name!r}")


class ResponseError(BotApiError):
    """Raised when the Bot API answers with any status other than 200.

    The message is fixed; the diagnostic detail lives in :attr:`response`.

    Attributes:
        response: The complete :class:`requests.Response` (status, headers, body).
    """

    MESSAGE = "Telegram API has returned the error."

    def __init__(self, response: requests.Response, message: str = MESSAGE) -> None:
        self.response = response
        super().__init__(message)

    @property
    def status_code(self) -> int:
        """HTTP status code of the carried response."""
        return self.response.status_code

    @property
    def data(self) -> Dict[str, Any]:
        """Parsed error body, or ``{}`` when it is not a JSON object."""
        try:
            body = self.response.json()
        except ValueError:
            return {}
        return body if isinstance(body, dict) else {}

    @property
    def error_code(self) -> Optional[int]:
        return self.data.get("error_code")

    @property
    def description(self) -> Optional[str]:
        return self.data.get("description")
