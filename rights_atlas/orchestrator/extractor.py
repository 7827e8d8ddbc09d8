"""Constrained extractor — index-bound citation extraction."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from rights_atlas.backends.base import GenerativeClient
from rights_atlas.errors import ParseFailure
from rights_atlas.models.citation import Candidate, CitationDraft

logger = logging.getLogger(__name__)

CITATION_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "analysis": {"type": "STRING"},
        "sourceMatches": {
            "type": "ARRAY",
            "items": {
                "type": "OBJECT",
                "properties": {
                    "urlIndex": {"type": "INTEGER"},
                    "title": {"type": "STRING"},
                    "year": {"type": "STRING"},
                    "reference": {"type": "STRING"},
                },
                "required": ["urlIndex", "title", "reference"],
            },
        },
    },
    "required": ["analysis", "sourceMatches"],
}

EXTRACTION_PROMPT = """\
Based on the following search results about: "{query}"

SEARCH CONTEXT:
{context}

Available verified sources (ONLY reference these by index, DO NOT invent sources):
{sources}

CRITICAL RULES:
1. ONLY use sources that appear in the list above
2. Reference sources by their index number [0, 1, 2, etc.]
3. DO NOT create, invent, or modify any URLs
4. If a source isn't in the list, don't include it
5. Better to return fewer sources than to hallucinate
6. Each source MUST have been found in the search results

For each source you reference:
- urlIndex: The exact index from the list above
- title: Enhanced with full official name and year if available
- year: Publication year (or "N/A")
- reference: Direct quote or specific finding (max 2-3 sentences)

Return JSON with "analysis" (brief summary) and "sourceMatches" array.\
"""


def format_sources(candidates: Sequence[Candidate]) -> str:
    return "\n\n".join(
        f"[{i}] {c.title}\n    URL: {c.uri}" for i, c in enumerate(candidates)
    )


def build_prompt(query: str, answer: str, candidates: Sequence[Candidate]) -> str:
    return EXTRACTION_PROMPT.format(
        query=query,
        context=answer.strip() or "(no narrative answer returned)",
        sources=format_sources(candidates),
    )


def _text(value, default: str = "") -> str:
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return default


def parse_drafts(payload) -> list[CitationDraft]:
    """Read ``sourceMatches`` from a structured response.

    Only the envelope is checked here; indices are left to the validator, so
    a malformed entry becomes a draft that will be rejected there.
    """
    if not isinstance(payload, dict):
        raise ParseFailure("Extraction response is not a JSON object")
    matches = payload.get("sourceMatches")
    if not isinstance(matches, list):
        raise ParseFailure("Extraction response has no sourceMatches array")

    drafts: list[CitationDraft] = []
    for match in matches:
        if not isinstance(match, dict):
            drafts.append(CitationDraft(url_index=None))
            continue
        drafts.append(
            CitationDraft(
                url_index=match.get("urlIndex"),
                title=_text(match.get("title")),
                year=_text(match.get("year")) or "N/A",
                reference=_text(match.get("reference")),
            )
        )
    return drafts


class ConstrainedExtractor:
    """Second model call: map the free-text answer onto indexed candidates."""

    def __init__(self, client: GenerativeClient) -> None:
        self.client = client

    async def extract(
        self, query: str, answer: str, candidates: Sequence[Candidate]
    ) -> list[CitationDraft]:
        if not candidates:
            # No reference targets, no model call.
            return []

        prompt = build_prompt(query, answer, candidates)
        payload = await self.client.generate_structured(prompt, CITATION_SCHEMA)
        drafts = parse_drafts(payload)
        logger.debug(
            "Extractor returned %d drafts for %d candidates", len(drafts), len(candidates)
        )
        return drafts
