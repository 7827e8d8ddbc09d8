"""Gemini backend — Google Generative Language REST API via httpx."""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx

from rights_atlas.backends.base import GroundedResponse, RawGroundingChunk
from rights_atlas.config import settings
from rights_atlas.errors import ParseFailure, UpstreamCallFailure

logger = logging.getLogger(__name__)

GEMINI_API_URL = "https://generativelanguage.googleapis.com/v1beta"


class GeminiClient:
    """Generative client backed by Gemini ``generateContent``.

    Search-augmented calls use ``search_model`` with the ``google_search``
    tool; schema-constrained calls use ``extraction_model`` in JSON mode.
    """

    name: str = "Gemini"

    def __init__(
        self,
        api_key: str | None = None,
        search_model: str | None = None,
        extraction_model: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.api_key = api_key if api_key is not None else settings.google_api_key
        self.search_model = search_model or settings.search_model
        self.extraction_model = extraction_model or settings.extraction_model
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self._transport = transport

    async def generate_grounded(self, prompt: str) -> GroundedResponse:
        """Call A: generation with Google Search grounding enabled."""
        data = await self._generate(
            self.search_model,
            {
                "contents": [{"role": "user", "parts": [{"text": prompt}]}],
                "tools": [{"google_search": {}}],
            },
        )
        candidate = self._first_candidate(data)
        text = self._extract_text(candidate)

        metadata = candidate.get("groundingMetadata") or {}
        raw_chunks = metadata.get("groundingChunks") if isinstance(metadata, dict) else None
        if not isinstance(raw_chunks, list):
            raw_chunks = []
        chunks = [RawGroundingChunk.from_payload(c) for c in raw_chunks]

        logger.info(
            "Gemini grounded call returned %d chars, %d grounding chunks",
            len(text), len(chunks),
        )
        return GroundedResponse(text=text, chunks=chunks)

    async def generate_structured(self, prompt: str, schema: dict) -> Any:
        """Call B: JSON-mode generation constrained by ``schema``."""
        data = await self._generate(
            self.extraction_model,
            {
                "contents": [{"role": "user", "parts": [{"text": prompt}]}],
                "generationConfig": {
                    "responseMimeType": "application/json",
                    "responseSchema": schema,
                },
            },
        )
        raw_text = self._extract_text(self._first_candidate(data))
        return self._parse_json(raw_text)

    async def _generate(self, model: str, body: dict) -> dict:
        if not self.api_key:
            raise UpstreamCallFailure("Gemini API key is not configured")

        url = f"{GEMINI_API_URL}/models/{model}:generateContent"
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.post(
                    url,
                    headers={
                        "Content-Type": "application/json",
                        "x-goog-api-key": self.api_key,
                    },
                    json=body,
                )
                response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            raise UpstreamCallFailure(
                f"Gemini returned HTTP {status} for {model}"
            ) from exc
        except httpx.HTTPError as exc:
            raise UpstreamCallFailure(f"Gemini request failed: {exc}") from exc

        try:
            data = response.json()
        except ValueError as exc:
            raise ParseFailure("Gemini response body is not JSON") from exc
        if not isinstance(data, dict):
            raise ParseFailure("Gemini response body is not an object")
        return data

    def _first_candidate(self, data: dict) -> dict:
        candidates = data.get("candidates")
        if not isinstance(candidates, list) or not candidates:
            feedback = data.get("promptFeedback")
            raise ParseFailure(f"Gemini returned no candidates (feedback: {feedback})")
        first = candidates[0]
        if not isinstance(first, dict):
            raise ParseFailure("Gemini candidate is not an object")
        return first

    def _extract_text(self, candidate: dict) -> str:
        """Concatenate the text parts of a candidate."""
        content = candidate.get("content") or {}
        parts = content.get("parts") if isinstance(content, dict) else None
        if not isinstance(parts, list):
            return ""
        return "".join(
            p["text"] for p in parts
            if isinstance(p, dict) and isinstance(p.get("text"), str)
        )

    def _parse_json(self, raw_text: str) -> Any:
        text = raw_text.strip()
        if text.startswith("```"):
            text = text.split("\n", 1)[1] if "\n" in text else ""
            text = text.rsplit("```", 1)[0]
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise ParseFailure(f"Structured response is not valid JSON: {exc}") from exc
