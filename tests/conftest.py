"""Shared fixtures and test doubles."""

from __future__ import annotations

from datetime import date
from typing import Any

import pytest

from rights_atlas.backends.base import GroundedResponse, RawGroundingChunk
from rights_atlas.orchestrator.retrieval import RetrievalOrchestrator


class FakeClient:
    """Generative client returning canned responses and recording calls."""

    def __init__(
        self,
        text: str = "Search answer.",
        chunks: list[RawGroundingChunk] | None = None,
        structured: Any = None,
        grounded_error: Exception | None = None,
        structured_error: Exception | None = None,
    ) -> None:
        self.text = text
        self.chunks = chunks or []
        self.structured = structured
        self.grounded_error = grounded_error
        self.structured_error = structured_error
        self.grounded_prompts: list[str] = []
        self.structured_calls: list[tuple[str, dict]] = []

    async def generate_grounded(self, prompt: str) -> GroundedResponse:
        self.grounded_prompts.append(prompt)
        if self.grounded_error is not None:
            raise self.grounded_error
        return GroundedResponse(text=self.text, chunks=list(self.chunks))

    async def generate_structured(self, prompt: str, schema: dict) -> Any:
        self.structured_calls.append((prompt, schema))
        if self.structured_error is not None:
            raise self.structured_error
        return self.structured


def chunk(uri: str | None, title: str | None = "Title") -> RawGroundingChunk:
    return RawGroundingChunk(web_title=title, web_uri=uri)


def match(index, title="Doc", year="2020", reference="Quoted finding.") -> dict:
    return {"urlIndex": index, "title": title, "year": year, "reference": reference}


@pytest.fixture
def fake_client():
    return FakeClient()


@pytest.fixture
def make_orchestrator():
    def _make(client: FakeClient) -> RetrievalOrchestrator:
        return RetrievalOrchestrator(client, today=date(2025, 6, 1))

    return _make
