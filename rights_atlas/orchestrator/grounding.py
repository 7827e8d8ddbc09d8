"""Grounding extractor — raw grounding chunks to ordered candidates."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from rights_atlas.backends.base import RawGroundingChunk
from rights_atlas.models.citation import Candidate

logger = logging.getLogger(__name__)

PLACEHOLDER_TITLE = "Source"

# Tool-call markup the search tool sometimes leaks into titles.
_TOOL_MARKUP = re.compile(r"(?is)\b(?:google_search|search_web|web_search)\s*\{.*?\}")
_WHITESPACE = re.compile(r"\s+")


def normalize_uri(uri: str) -> str:
    return uri.strip()


def clean_title(title: str | None) -> str:
    if not title:
        return PLACEHOLDER_TITLE
    cleaned = _WHITESPACE.sub(" ", _TOOL_MARKUP.sub("", title)).strip()
    return cleaned or PLACEHOLDER_TITLE


def extract_candidates(chunks: Iterable[RawGroundingChunk] | None) -> list[Candidate]:
    """Turn grounding chunks into candidates, first occurrence of a URI wins.

    Chunks without a URI are dropped and missing titles get a placeholder.
    No chunks at all is a normal outcome and yields an empty list.
    """
    candidates: list[Candidate] = []
    seen: set[str] = set()
    dropped = 0

    for chunk in chunks or ():
        uri = normalize_uri(chunk.web_uri or "")
        if not uri:
            dropped += 1
            continue
        if uri in seen:
            continue
        seen.add(uri)
        candidates.append(Candidate(title=clean_title(chunk.web_title), uri=uri))

    if dropped:
        logger.debug("Dropped %d grounding chunks without a URI", dropped)
    return candidates
