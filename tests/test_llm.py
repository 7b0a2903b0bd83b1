"""Unit tests for the llm module."""
import json

import httpx
import pytest
from hypothesis import assume, given
from hypothesis import strategies as st

from usharani.llm import (
    CompletionClient,
    GeminiClient,
    GenerateContentRequest,
    create_completion_client,
    extract_reply_text,
)

from conftest import HELLO_BODY


def make_client(handler, **kwargs) -> GeminiClient:
    """Gemini client whose requests are answered by ``handler``."""
    kwargs.setdefault("api_key", "test-key")
    return GeminiClient(transport=httpx.MockTransport(handler), **kwargs)


class TestCompletionClientInterface:
    """Tests for the abstract CompletionClient interface."""

    def test_client_is_abstract(self):
        """Test that CompletionClient cannot be instantiated directly."""
        with pytest.raises(TypeError):
            CompletionClient()  # type: ignore


class TestGenerateContentRequest:
    """Tests for request payload construction."""

    def test_single_turn_payload_shape(self):
        """Test the exact wire shape of a single-turn request."""
        payload = GenerateContentRequest.single_turn("Hi there").to_payload()

        assert payload == {"contents": [{"role": "user", "parts": [{"text": "Hi there"}]}]}

    def test_payload_keeps_text_verbatim(self):
        """Test that surrounding whitespace is not stripped."""
        payload = GenerateContentRequest.single_turn("  padded  ").to_payload()

        assert payload["contents"][0]["parts"][0]["text"] == "  padded  "


class TestExtractReplyText:
    """Tests for response structure classification."""

    def test_well_formed_body(self):
        assert extract_reply_text(HELLO_BODY) == "Hello!"

    def test_uses_first_candidate_and_first_part(self):
        body = {
            "candidates": [
                {"content": {"parts": [{"text": "first"}, {"text": "second"}]}},
                {"content": {"parts": [{"text": "other"}]}},
            ]
        }
        assert extract_reply_text(body) == "first"

    def test_ignores_extra_fields(self):
        body = {
            "candidates": [
                {
                    "content": {"parts": [{"text": "ok"}], "role": "model"},
                    "finishReason": "STOP",
                }
            ],
            "usageMetadata": {"totalTokenCount": 3},
        }
        assert extract_reply_text(body) == "ok"

    @pytest.mark.parametrize(
        "body",
        [
            {"candidates": [{"content": {"parts": [{"text": "ok"}]}}, "junk"]},
            {"candidates": [{"content": {"parts": [{"text": "ok"}, {"text": 5}]}}]},
            {"candidates": [{"content": {"parts": [{"text": "ok"}], "role": 1}}]},
            {"candidates": [{"content": {"parts": [{"text": "ok"}]}}], "usageMetadata": "n/a"},
        ],
    )
    def test_fields_off_the_reply_path_are_not_validated(self, body):
        assert extract_reply_text(body) == "ok"

    @pytest.mark.parametrize(
        "body",
        [
            {},
            {"candidates": []},
            {"candidates": None},
            {"candidates": [{}]},
            {"candidates": [{"content": {}}]},
            {"candidates": [{"content": {"parts": []}}]},
            {"candidates": [{"content": {"parts": [{}]}}]},
            {"candidates": [{"content": {"parts": [{"text": 42}]}}]},
            {"candidates": "nope"},
            {"candidates": ["junk", {"content": {"parts": [{"text": "late"}]}}]},
            {"candidates": [{"content": {"parts": "text"}}]},
            {"error": {"code": 400, "message": "API key not valid"}},
            [],
            None,
            "text",
        ],
    )
    def test_malformed_bodies_return_none(self, body):
        assert extract_reply_text(body) is None

    @given(st.text())
    def test_any_reply_text_is_extracted(self, text: str):
        """Property test: well-formed bodies yield their text unchanged."""
        body = {"candidates": [{"content": {"parts": [{"text": text}]}}]}
        assert extract_reply_text(body) == text


class TestGeminiClient:
    """Tests for GeminiClient wire behavior."""

    @pytest.mark.asyncio
    async def test_default_endpoint(self):
        async with GeminiClient(api_key="") as client:
            assert client.model == "gemini-2.0-flash"
            assert client.endpoint == (
                "https://generativelanguage.googleapis.com/v1beta/models/"
                "gemini-2.0-flash:generateContent"
            )

    @pytest.mark.asyncio
    async def test_endpoint_override(self):
        async with GeminiClient(api_key="", endpoint="http://localhost:8080/generate") as client:
            assert client.endpoint == "http://localhost:8080/generate"

    @pytest.mark.asyncio
    async def test_posts_json_with_key_parameter(self):
        """Test method, query key, header and body of the request."""
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=HELLO_BODY)

        client = make_client(handler)
        payload = GenerateContentRequest.single_turn("Hi").to_payload()
        try:
            body = await client.generate_content(payload)
        finally:
            await client.close()

        assert body == HELLO_BODY
        assert len(seen) == 1
        request = seen[0]
        assert request.method == "POST"
        assert request.url.path == "/v1beta/models/gemini-2.0-flash:generateContent"
        assert request.url.params["key"] == "test-key"
        assert request.headers["content-type"] == "application/json"
        assert json.loads(request.content) == payload
        assert client.last_status == 200

    @pytest.mark.asyncio
    async def test_empty_api_key_is_still_sent(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={})

        async with make_client(handler, api_key="") as client:
            await client.generate_content({"contents": []})

        assert seen[0].url.params["key"] == ""
        assert str(seen[0].url).endswith("?key=")

    @pytest.mark.asyncio
    async def test_error_status_body_is_returned(self):
        """Test that non-2xx responses are not raised."""
        error_body = {"error": {"code": 403, "message": "denied"}}

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(403, json=error_body)

        async with make_client(handler) as client:
            body = await client.generate_content({"contents": []})
            assert client.last_status == 403

        assert body == error_body

    @pytest.mark.asyncio
    async def test_non_json_body_raises_value_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(502, text="<html>Bad Gateway</html>")

        async with make_client(handler) as client:
            with pytest.raises(ValueError):
                await client.generate_content({"contents": []})

    @pytest.mark.asyncio
    async def test_network_error_propagates(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with make_client(handler) as client:
            with pytest.raises(httpx.ConnectError):
                await client.generate_content({"contents": []})

    @pytest.mark.asyncio
    @pytest.mark.integration
    async def test_generate_content_real_api(self, api_keys):
        """Integration test: one request against the real endpoint."""
        if not api_keys["gemini"]:
            pytest.skip("GEMINI_API_KEY not set")

        async with GeminiClient(api_key=api_keys["gemini"]) as client:
            payload = GenerateContentRequest.single_turn("Reply with the word: pong").to_payload()
            body = await client.generate_content(payload)

        assert extract_reply_text(body)


class TestCompletionClientFactory:
    """Tests for completion client factory function."""

    @pytest.mark.asyncio
    async def test_create_gemini_client(self):
        client = create_completion_client("gemini", api_key="", model="gemini-2.5-flash")
        async with client:
            assert isinstance(client, GeminiClient)
            assert client.model == "gemini-2.5-flash"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("provider_name", ["gemini", "Gemini", "GOOGLE", "google"])
    async def test_known_provider_names_are_case_insensitive(self, provider_name: str):
        async with create_completion_client(provider_name, api_key="") as client:
            assert isinstance(client, GeminiClient)

    def test_create_client_unknown_type(self):
        with pytest.raises(ValueError, match="Unsupported provider"):
            create_completion_client("unknown", api_key="test-key")

    def test_create_client_missing_api_key(self):
        with pytest.raises(TypeError, match="requires 'api_key'"):
            create_completion_client("gemini")

    @given(st.text(min_size=1))
    def test_factory_rejects_random_provider_names(self, provider_name: str):
        """Property test: Factory should only accept known providers."""
        assume(provider_name.lower() not in ("gemini", "google"))
        with pytest.raises(ValueError):
            create_completion_client(provider_name, api_key="")
