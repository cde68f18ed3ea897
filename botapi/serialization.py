"""Parameter sanitization and JSON encoding for outgoing Bot API calls.

Rich values are recognised by exact class identity against the two closed
families declared in :mod:`botapi.models`.  Reply markup becomes a JSON string
of its compact dict (``None`` fields dropped); a list of inline query results
becomes a JSON string of compact dicts with every falsy field dropped.
Everything else passes through untouched.
"""

import json
import logging
from typing import Any, Dict, Mapping, Optional

from botapi.models import INLINE_QUERY_RESULT_TYPES, REPLY_MARKUP_TYPES, TelegramObject

logger = logging.getLogger("botapi.serialization")

_JSON_SEPARATORS = (",", ":")


def _encode_object(value: Any) -> Any:
    # Models outside both families (e.g. inside a mixed list) go out as plain objects.
    if isinstance(value, TelegramObject):
        return value.to_compact_dict()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _dumps(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, separators=_JSON_SEPARATORS, default=_encode_object)


def is_reply_markup(value: Any) -> bool:
    return type(value) in REPLY_MARKUP_TYPES


def is_inline_query_result(value: Any) -> bool:
    return type(value) in INLINE_QUERY_RESULT_TYPES


def jsonify_reply_markup(value: Any) -> Any:
    """Encode a reply-markup model as JSON text; return anything else as is."""
    if not is_reply_markup(value):
        return value
    return _dumps(value.to_compact_dict())


def jsonify_inline_query_results(value: Any) -> Any:
    """Encode a non-empty list of inline query results as JSON text.

    Falsy top-level fields (``False``, ``0``, ``""`` and empty containers as
    well as ``None``) are removed from each result.  Lists that are empty or
    contain anything other than inline query results are returned as is.
    """
    if not isinstance(value, (list, tuple)) or not value:
        return value
    if not all(is_inline_query_result(item) for item in value):
        return value
    return _dumps([
        {key: field for key, field in item.to_compact_dict().items() if field}
        for item in value
    ])


def sanitize_value(value: Any) -> Any:
    return jsonify_inline_query_results(jsonify_reply_markup(value))


def build_params(raw_params: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """Return a new dict with the same keys, in order, and sanitized values."""
    if not raw_params:
        return {}
    params = {key: sanitize_value(value) for key, value in raw_params.items()}
    logger.debug("Parameters sanitized", extra={"param_names": list(params)})
    return params


def encode_body(params: Mapping[str, Any]) -> str:
    """Serialize sanitized parameters to the JSON request body."""
    return _dumps(dict(params))
