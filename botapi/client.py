"""TelegramBotApi -- dynamic call dispatcher for the Telegram Bot API.

Any whitelisted endpoint can be called by name, in camelCase or snake_case::

    api = TelegramBotApi(token)
    api.call("sendMessage", {"chat_id": 42, "text": "hi"})
    api.send_message(chat_id=42, text="hi", reply_markup=ForceReply())

Parameters are sanitized by :mod:`botapi.serialization`, POSTed as JSON to
``/bot<token>/<Endpoint>`` over a transport that is built once per client, and
the response is interpreted by :func:`interpret_response`.
"""

from __future__ import annotations

import functools
import logging
import threading
from typing import Any, Callable, List, Mapping, Optional

import requests
from requests.adapters import BaseAdapter

from config import API_BASE_URL, load_proxy_config
from botapi.endpoints import ENDPOINTS, is_endpoint, normalize, resolve_endpoint, snake_case
from botapi.exceptions import ResponseError, UnknownEndpointError
from botapi.serialization import build_params, encode_body
from botapi.transport import ProxyConfig, Transport, build_transport

logger = logging.getLogger("botapi.client")


def interpret_response(response: requests.Response) -> Any:
    """Return the decoded JSON body of a 200 response.

    Raises:
        ResponseError: For any status code other than 200.
        ValueError: If a 200 response body is not valid JSON.
    """
    if response.status_code == 200:
        return response.json()
    raise ResponseError(response)


class TelegramBotApi:
    """Client for every endpoint in :data:`~botapi.endpoints.ENDPOINTS`.

    The HTTP transport is selected on first use from *proxy_config*, or from
    the environment (see :func:`config.load_proxy_config`) when no config was
    given, and is reused for the lifetime of the client.
    """

    def __init__(
        self,
        token: str,
        proxy_config: Optional[ProxyConfig] = None,
        base_url: str = API_BASE_URL,
        adapter: Optional[BaseAdapter] = None,
    ) -> None:
        """Create a client for the bot identified by *token*.

        Args:
            token: Bot access token issued by BotFather.
            proxy_config: Explicit connection options. ``None`` defers to the
                environment at first call.
            base_url: API origin.
            adapter: Optional :mod:`requests` adapter mounted on the session.
        """
        self._token = token
        self._proxy_config = proxy_config
        self._base_url = base_url
        self._adapter = adapter
        self._transport: Optional[Transport] = None
        self._transport_lock = threading.Lock()

    @property
    def token(self) -> str:
        return self._token

    # ------------------------------------------------------------------
    #  Transport
    # ------------------------------------------------------------------

    @property
    def transport(self) -> Transport:
        """The client's transport, built on first access and cached."""
        if self._transport is None:
            with self._transport_lock:
                if self._transport is None:
                    config = self._proxy_config if self._proxy_config is not None else load_proxy_config()
                    self._transport = build_transport(config, self._base_url, self._adapter)
        return self._transport

    def close(self) -> None:
        """Release pooled connections of the session, if one was built.

        The transport stays installed; a later call reopens connections on
        the same session.
        """
        if self._transport is not None:
            self._transport.close()

    def __enter__(self) -> "TelegramBotApi":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ------------------------------------------------------------------
    #  Dispatch
    # ------------------------------------------------------------------

    def supports(self, name: str) -> bool:
        """Whether *name* (camelCase or snake_case) is a known endpoint."""
        return is_endpoint(name)

    def call(self, name: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        """Invoke the endpoint *name* with *params* and return the decoded body.

        Raises:
            UnknownEndpointError: If *name* is not a whitelisted endpoint.
            ResponseError: If the API answers with a status other than 200.
            requests.RequestException: On transport-level failures.
        """
        endpoint = resolve_endpoint(name)
        if endpoint is None:
            logger.debug("Unknown endpoint requested", extra={"method_name": name})
            raise UnknownEndpointError(name, normalize(name))

        body = encode_body(build_params(params))
        logger.debug("Dispatching Bot API call", extra={"api_endpoint": endpoint})
        response = self.transport.post(f"/bot{self._token}/{endpoint}", body)
        try:
            return interpret_response(response)
        except ResponseError:
            logger.warning(
                "Telegram API error response",
                extra={"api_endpoint": endpoint, "status_code": response.status_code},
            )
            raise

    def _invoke(self, endpoint: str, params: Optional[Mapping[str, Any]] = None, /, **kwargs: Any) -> Any:
        merged = dict(params or {})
        merged.update(kwargs)
        return self.call(endpoint, merged)

    def __getattr__(self, name: str) -> Callable[..., Any]:
        if name.startswith("_"):
            raise AttributeError(name)
        endpoint = resolve_endpoint(name)
        if endpoint is None:
            raise UnknownEndpointError(name, normalize(name))
        return functools.partial(self._invoke, endpoint)

    def __dir__(self) -> List[str]:
        return sorted(set(super().__dir__()) | {snake_case(endpoint) for endpoint in ENDPOINTS})

    def __repr__(self) -> str:
        return f"TelegramBotApi(base_url={self._base_url!r})"
