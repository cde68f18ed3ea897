"""Bot API endpoint catalog and operation-name resolution."""

from typing import FrozenSet, Optional

ENDPOINTS: FrozenSet[str] = frozenset({
    "getUpdates", "setWebhook", "deleteWebhook", "getWebhookInfo", "getMe",
    "sendMessage", "forwardMessage", "sendPhoto", "sendAudio", "sendDocument",
    "sendVideo", "sendVoice", "sendVideoNote", "sendMediaGroup", "sendLocation",
    "editMessageLiveLocation", "stopMessageLiveLocation", "sendVenue",
    "sendContact", "sendChatAction", "getUserProfilePhotos", "getFile",
    "kickChatMember", "unbanChatMember", "restrictChatMember",
    "promoteChatMember", "leaveChat", "getChat", "getChatAdministrators",
    "exportChatInviteLink", "setChatPhoto", "deleteChatPhoto", "setChatTitle",
    "setChatDescription", "pinChatMessage", "unpinChatMessage",
    "getChatMembersCount", "getChatMember", "setChatStickerSet",
    "deleteChatStickerSet", "answerCallbackQuery", "editMessageText",
    "editMessageCaption", "editMessageReplyMarkup", "deleteMessage",
    "sendSticker", "getStickerSet", "uploadStickerFile", "createNewStickerSet",
    "addStickerToSet", "setStickerPositionInSet", "deleteStickerFromSet",
    "answerInlineQuery", "sendInvoice", "answerShippingQuery",
    "answerPreCheckoutQuery", "sendGame", "setGameScore", "getGameHighScores",
})

_SEPARATOR = "_"


def camelize(name: str) -> str:
    """Convert ``send_message`` to ``sendMessage``.

    The first word is kept verbatim; each following word is capitalized
    (``str.capitalize`` semantics) and the pieces are joined without a
    separator.
    """
    first, *rest = name.split(_SEPARATOR)
    return first + "".join(word.capitalize() for word in rest)


def normalize(name: str) -> str:
    """Return the camelCase form of *name*; names without ``_`` pass through."""
    return camelize(name) if _SEPARATOR in name else name


def resolve_endpoint(name: str) -> Optional[str]:
    """Return the whitelisted endpoint *name* refers to, or ``None``."""
    endpoint = normalize(name)
    return endpoint if endpoint in ENDPOINTS else None


def is_endpoint(name: str) -> bool:
    return resolve_endpoint(name) is not None


def snake_case(endpoint: str) -> str:
    """Convert ``sendMessage`` to ``send_message`` (used for ``dir()`` listings)."""
    return "".join(f"_{ch.lower()}" if ch.isupper() else ch for ch in endpoint)
