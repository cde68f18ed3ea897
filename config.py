"""Application configuration: environment variables and derived constants.

Loads the ``.env`` file via ``python-dotenv`` and exposes the Bot API origin,
the names of the proxy environment variables, and :func:`load_proxy_config`,
which the client calls lazily when its transport is first needed.
"""

# ── stdlib ───────────────────────────────────────────────────────────────────
import logging
import os
from typing import TYPE_CHECKING

# ── third-party ──────────────────────────────────────────────────────────────
from dotenv import load_dotenv

# ── core ─────────────────────────────────────────────────────────────────────
from core.logger import BotApiLogger

if TYPE_CHECKING:
    from botapi.transport import ProxyConfig

# ── Environment bootstrap ────────────────────────────────────────────────────
load_dotenv()


# ── Helper functions (private) ───────────────────────────────────────────────


def _env(name: str) -> str | None:
    """Return the environment value for *name*, treating blanks as unset."""
    value = os.environ.get(name)
    if value is None:
        return None
    value = value.strip()
    return value or None


def _env_flag(name: str) -> bool:
    """Interpret ``1``/``true``/``yes``/``on`` (any case) as enabled."""
    return (_env(name) or "").lower() in {"1", "true", "yes", "on"}


def _resolve_log_level(raw: str | None) -> int:
    """Map a level name such as ``"DEBUG"`` to its numeric value.

    Unknown names fall back to ``INFO``.
    """
    if not raw:
        return logging.INFO
    level = logging.getLevelName(raw.upper())
    return level if isinstance(level, int) else logging.INFO


# ── Public constants ─────────────────────────────────────────────────────────

API_BASE_URL: str = "https://api.telegram.org"

HTTP_PROXY_ENV: str = "TELEGRAM_HTTP_PROXY"
SOCKS5_PROXY_ENV: str = "TELEGRAM_SOCKS5_PROXY"
PROXY_USER_ENV: str = "TELEGRAM_PROXY_USER"
PROXY_PASSWORD_ENV: str = "TELEGRAM_PROXY_PASSWORD"
VERIFY_TLS_ENV: str = "TELEGRAM_VERIFY_TLS"

BOT_TOKEN: str | None = _env("BOT_TOKEN")
LOG_LEVEL: int = _resolve_log_level(_env("BOTAPI_LOG_LEVEL"))
LOG_FILE: str | None = _env("BOTAPI_LOG_FILE")

# ── Logger ───────────────────────────────────────────────────────────────────
logger = BotApiLogger.get_logger(LOG_LEVEL, LOG_FILE)


def load_proxy_config() -> "ProxyConfig":
    """Build a :class:`~botapi.transport.ProxyConfig` from the environment.

    The environment is read on every call, not at import time, so a client
    that selects its transport lazily sees the values present at first use.
    """
    from botapi.transport import ProxyConfig  # deferred to avoid circular imports

    proxy_config = ProxyConfig(
        http_proxy_url=_env(HTTP_PROXY_ENV),
        socks5_proxy_url=_env(SOCKS5_PROXY_ENV),
        socks5_user=_env(PROXY_USER_ENV),
        socks5_password=_env(PROXY_PASSWORD_ENV),
        verify_tls=_env_flag(VERIFY_TLS_ENV),
    )
    logger.debug("Proxy configuration loaded from environment", extra={"profile": proxy_config.profile.value})
    return proxy_config


# ── Startup diagnostics ─────────────────────────────────────────────────────

if BOT_TOKEN:
    logger.debug("Config loaded, BOT_TOKEN is set")
else:
    logger.debug("Config loaded, BOT_TOKEN is NOT set")
