"""Result validator — index checks, URI mapping and dedup."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from rights_atlas.models.citation import Candidate, Citation, CitationDraft

logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    citations: list[Citation] = field(default_factory=list)
    rejected: int = 0
    duplicates: int = 0


def coerce_index(value) -> int | None:
    """Return ``value`` as an int if it is integral, else ``None``.

    Integral floats (``2.0``) are accepted since JSON numbers may arrive that
    way; booleans and numeric strings are not.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


class ResultValidator:
    """Maps drafts onto trusted candidates, never onto model-echoed URLs."""

    def validate(
        self, drafts: Sequence[CitationDraft], candidates: Sequence[Candidate]
    ) -> ValidationResult:
        result = ValidationResult()
        seen: set[str] = set()

        for draft in drafts:
            index = coerce_index(draft.url_index)
            if index is None or not 0 <= index < len(candidates):
                logger.warning(
                    "Invalid urlIndex %r (have %d candidates), skipping source",
                    draft.url_index, len(candidates),
                )
                result.rejected += 1
                continue

            candidate = candidates[index]
            if candidate.uri in seen:
                result.duplicates += 1
                continue
            seen.add(candidate.uri)

            result.citations.append(
                Citation(
                    title=draft.title or candidate.title,
                    uri=candidate.uri,
                    date=draft.year or "N/A",
                    reference=draft.reference,
                )
            )

        return result
