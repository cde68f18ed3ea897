"""Tests for the endpoint catalog and operation-name resolution."""

import pytest

from botapi.endpoints import ENDPOINTS, camelize, is_endpoint, normalize, resolve_endpoint, snake_case


class TestCamelize:
    """Validate snake_case -> camelCase conversion."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("send_message", "sendMessage"),
            ("get_me", "getMe"),
            ("edit_message_reply_markup", "editMessageReplyMarkup"),
            ("send_MESSAGE", "sendMessage"),
            ("send__message", "sendMessage"),
            ("get", "get"),
        ],
    )
    def test_camelize(self, name: str, expected: str) -> None:
        assert camelize(name) == expected

    def test_first_word_kept_verbatim(self) -> None:
        assert camelize("Send_message") == "SendMessage"

    def test_normalize_leaves_camel_case_alone(self) -> None:
        assert normalize("sendMessage") == "sendMessage"
        assert normalize("SENDMESSAGE") == "SENDMESSAGE"


class TestResolveEndpoint:
    """Validate whitelist lookups."""

    def test_catalog_size(self) -> None:
        assert len(ENDPOINTS) == 59

    @pytest.mark.parametrize("endpoint", sorted(ENDPOINTS))
    def test_both_conventions_resolve_to_same_endpoint(self, endpoint: str) -> None:
        assert resolve_endpoint(endpoint) == endpoint
        assert resolve_endpoint(snake_case(endpoint)) == endpoint

    @pytest.mark.parametrize("name", ["sendTelepathy", "send_telepathy", "sendmessage", "SendMessage", "", "_get_me"])
    def test_unknown_names(self, name: str) -> None:
        assert resolve_endpoint(name) is None
        assert is_endpoint(name) is False

    def test_snake_case(self) -> None:
        assert snake_case("answerPreCheckoutQuery") == "answer_pre_checkout_query"
