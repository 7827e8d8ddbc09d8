"""Generative client protocol and the raw grounding types it returns."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable


@dataclass(frozen=True)
class RawGroundingChunk:
    """One grounding chunk as attached to a search-augmented response.

    Both fields are optional: providers may omit the title, the URL, or the
    whole ``web`` block.
    """

    web_title: str | None = None
    web_uri: str | None = None

    @classmethod
    def from_payload(cls, payload: Any) -> RawGroundingChunk:
        """Build a chunk from an untyped ``groundingChunks`` entry."""
        if not isinstance(payload, dict):
            return cls()
        web = payload.get("web")
        if not isinstance(web, dict):
            return cls()
        title = web.get("title")
        uri = web.get("uri")
        return cls(
            web_title=title if isinstance(title, str) else None,
            web_uri=uri if isinstance(uri, str) else None,
        )


@dataclass
class GroundedResponse:
    """Result of a search-augmented generation call."""

    text: str
    chunks: list[RawGroundingChunk] = field(default_factory=list)


@runtime_checkable
class GenerativeClient(Protocol):
    """Interface the orchestrator needs from a model provider."""

    async def generate_grounded(self, prompt: str) -> GroundedResponse:
        """Run a search-augmented generation and return text plus grounding."""
        ...

    async def generate_structured(self, prompt: str, schema: dict) -> Any:
        """Run a schema-constrained generation and return the decoded JSON."""
        ...
