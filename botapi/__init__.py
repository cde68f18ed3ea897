"""Telegram Bot API client: dynamic call dispatch over a single JSON pipeline.

Usage::

    from botapi import TelegramBotApi, ResponseError
    from botapi.models import InlineKeyboardMarkup, InlineKeyboardButton

    api = TelegramBotApi(token)
    api.send_message(chat_id=42, text="hi")
"""

from botapi.client import TelegramBotApi, interpret_response
from botapi.endpoints import ENDPOINTS
from botapi.exceptions import BotApiError, ResponseError, UnknownEndpointError
from botapi.transport import ProxyConfig, Transport, TransportProfile

__all__ = [
    "TelegramBotApi",
    "interpret_response",
    "ENDPOINTS",
    "BotApiError",
    "ResponseError",
    "UnknownEndpointError",
    "ProxyConfig",
    "Transport",
    "TransportProfile",
]
