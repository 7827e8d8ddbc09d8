"""Tests for rights_atlas/backends/gemini.py using httpx.MockTransport."""

from __future__ import annotations

import json

import httpx
import pytest

from rights_atlas.backends.base import RawGroundingChunk
from rights_atlas.backends.gemini import GeminiClient
from rights_atlas.errors import ParseFailure, UpstreamCallFailure


def _client(handler, api_key: str = "test-key") -> GeminiClient:
    return GeminiClient(
        api_key=api_key,
        search_model="search-model",
        extraction_model="extract-model",
        timeout=5.0,
        transport=httpx.MockTransport(handler),
    )


def _candidate_body(text: str, metadata: dict | None = None) -> dict:
    candidate = {"content": {"parts": [{"text": text}]}}
    if metadata is not None:
        candidate["groundingMetadata"] = metadata
    return {"candidates": [candidate]}


class TestGenerateGrounded:
    @pytest.mark.asyncio
    async def test_sends_search_tool_and_reads_chunks(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            seen["key"] = request.headers["x-goog-api-key"]
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json=_candidate_body(
                "Answer",
                {"groundingChunks": [
                    {"web": {"uri": "https://ohchr.org/x", "title": "OHCHR"}},
                    {"retrievedContext": {}},
                ]},
            ))

        response = await _client(handler).generate_grounded("find instruments")

        assert seen["url"].endswith("/models/search-model:generateContent")
        assert seen["key"] == "test-key"
        assert seen["body"]["tools"] == [{"google_search": {}}]
        assert seen["body"]["contents"][0]["parts"][0]["text"] == "find instruments"
        assert response.text == "Answer"
        assert response.chunks == [
            RawGroundingChunk(web_title="OHCHR", web_uri="https://ohchr.org/x"),
            RawGroundingChunk(),
        ]

    @pytest.mark.asyncio
    async def test_missing_grounding_metadata_is_empty(self):
        def handler(request):
            return httpx.Response(200, json=_candidate_body("Answer"))

        response = await _client(handler).generate_grounded("q")
        assert response.chunks == []

    @pytest.mark.asyncio
    async def test_joins_text_parts(self):
        def handler(request):
            body = {"candidates": [{"content": {"parts": [{"text": "a"}, {"inline": 1}, {"text": "b"}]}}]}
            return httpx.Response(200, json=body)

        response = await _client(handler).generate_grounded("q")
        assert response.text == "ab"


class TestGenerateStructured:
    @pytest.mark.asyncio
    async def test_sends_schema_and_decodes_json(self):
        seen = {}

        def handler(request):
            seen["url"] = str(request.url)
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json=_candidate_body('{"sourceMatches": []}'))

        schema = {"type": "OBJECT"}
        payload = await _client(handler).generate_structured("prompt", schema)

        assert payload == {"sourceMatches": []}
        assert seen["url"].endswith("/models/extract-model:generateContent")
        config = seen["body"]["generationConfig"]
        assert config["responseMimeType"] == "application/json"
        assert config["responseSchema"] == schema

    @pytest.mark.asyncio
    async def test_tolerates_markdown_fences(self):
        def handler(request):
            return httpx.Response(200, json=_candidate_body('```json\n["1", "2"]\n```'))

        assert await _client(handler).generate_structured("p", {}) == ["1", "2"]

    @pytest.mark.asyncio
    async def test_invalid_json_is_parse_failure(self):
        def handler(request):
            return httpx.Response(200, json=_candidate_body("not json"))

        with pytest.raises(ParseFailure):
            await _client(handler).generate_structured("p", {})


class TestFailures:
    @pytest.mark.asyncio
    async def test_missing_api_key_fails_without_request(self):
        def handler(request):
            raise AssertionError("no request expected")

        with pytest.raises(UpstreamCallFailure):
            await _client(handler, api_key="").generate_grounded("q")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [401, 403, 429, 500])
    async def test_http_errors_are_upstream_failures(self, status):
        def handler(request):
            return httpx.Response(status, json={"error": {"message": "nope"}})

        with pytest.raises(UpstreamCallFailure, match=str(status)):
            await _client(handler).generate_grounded("q")

    @pytest.mark.asyncio
    async def test_transport_errors_are_upstream_failures(self):
        def handler(request):
            raise httpx.ConnectError("unreachable", request=request)

        with pytest.raises(UpstreamCallFailure):
            await _client(handler).generate_structured("p", {})

    @pytest.mark.asyncio
    async def test_non_json_body_is_parse_failure(self):
        def handler(request):
            return httpx.Response(200, content=b"<html>")

        with pytest.raises(ParseFailure):
            await _client(handler).generate_grounded("q")

    @pytest.mark.asyncio
    async def test_no_candidates_is_parse_failure(self):
        def handler(request):
            return httpx.Response(200, json={"promptFeedback": {"blockReason": "SAFETY"}})

        with pytest.raises(ParseFailure):
            await _client(handler).generate_grounded("q")
