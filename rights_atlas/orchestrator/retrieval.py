"""Retrieval orchestrator — sequences search, filtering, extraction and validation."""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from datetime import date
from enum import Enum
from urllib.parse import quote_plus

from rights_atlas.backends.base import GenerativeClient
from rights_atlas.errors import AtlasError
from rights_atlas.models.citation import Candidate, Citation, DialogueResult
from rights_atlas.models.request import RequestCategory, Scope
from rights_atlas.models.right import Right
from rights_atlas.orchestrator import queries
from rights_atlas.orchestrator.extractor import ConstrainedExtractor
from rights_atlas.orchestrator.grounding import extract_candidates
from rights_atlas.orchestrator.trust_policy import DomainTrustPolicy
from rights_atlas.orchestrator.validator import ResultValidator

logger = logging.getLogger(__name__)

SEMANTIC_SCHEMA = {"type": "ARRAY", "items": {"type": "STRING"}}

SEMANTIC_PROMPT = """\
Given this term: "{term}", identify which of the following Human Rights IDs are most relevant.
Rights: {rights}
Return ONLY a JSON array of ID strings. Example: ["1", "5"]\
"""

FALLBACK_URIS = {
    RequestCategory.LEGAL_FRAMEWORK: "https://www.ohchr.org/en/instruments-listings",
    RequestCategory.FIELD_STATUS: "https://www.ohchr.org/en/countries",
}
SCHOLAR_SEARCH_URL = "https://scholar.google.com/scholar?q="


class RetrievalState(Enum):
    IDLE = "idle"
    SEARCHING = "searching"
    EXTRACTED = "extracted"
    FILTERED = "filtered"
    EMPTY = "empty"
    EXTRACTING = "extracting"
    VALIDATED = "validated"
    DONE = "done"
    FAILED = "failed"


def degraded_result(category: RequestCategory, subjects: Sequence[str]) -> DialogueResult:
    """Single placeholder citation pointing at a manual fallback."""
    if category is RequestCategory.NEXUS:
        uri = SCHOLAR_SEARCH_URL + quote_plus(" ".join(f'"{s}"' for s in subjects))
        title = "Search Google Scholar manually"
    else:
        uri = FALLBACK_URIS[category]
        title = "Consult the UN Human Rights portal"
    return DialogueResult(
        sources=[
            Citation(
                title=title,
                uri=uri,
                date="N/A",
                reference=(
                    "The evidence search could not be completed. "
                    "The linked portal can be searched manually instead."
                ),
            )
        ]
    )


def coerce_id_list(payload) -> list:
    """Accept a bare array, or the first array-valued field of an object."""
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict):
        for value in payload.values():
            if isinstance(value, list):
                return value
    return []


class RetrievalOrchestrator:
    """Runs one request through the grounded-citation pipeline.

    Each request makes at most two sequential model calls and never retries.
    Failures are caught here and turned into a degraded result.
    """

    def __init__(
        self,
        client: GenerativeClient,
        policy: DomainTrustPolicy | None = None,
        validator: ResultValidator | None = None,
        today: date | None = None,
    ) -> None:
        self.client = client
        self.policy = policy or DomainTrustPolicy()
        self.extractor = ConstrainedExtractor(client)
        self.validator = validator or ResultValidator()
        self.today = today

    async def legal_framework(
        self, right: str, scope: Scope, sub_scope: str = ""
    ) -> DialogueResult:
        label = f"{scope.value} legal instruments for {right}"
        if sub_scope:
            label += f" in {sub_scope}"
        return await self._run(
            RequestCategory.LEGAL_FRAMEWORK, [right], scope, sub_scope, label
        )

    async def field_status(
        self, right: str, scope: Scope, sub_scope: str = ""
    ) -> DialogueResult:
        label = f"status reports on {right} in {sub_scope or 'the world'}"
        return await self._run(
            RequestCategory.FIELD_STATUS, [right], scope, sub_scope, label
        )

    async def nexus(
        self, right_a: str, right_b: str, scope: Scope, sub_scope: str = ""
    ) -> DialogueResult:
        label = f"nexus between {right_a} and {right_b}"
        return await self._run(
            RequestCategory.NEXUS, [right_a, right_b], scope, sub_scope, label
        )

    async def semantic_match(self, term: str, rights: Sequence[Right]) -> list[str]:
        """Ask the model which of ``rights`` relate to ``term``.

        Returns known ids only, in model order, without duplicates.
        """
        term = term.strip()
        if not term or not rights:
            return []

        listing = json.dumps(
            [{"id": r.id, "name": r.name, "summary": r.summary} for r in rights]
        )
        prompt = SEMANTIC_PROMPT.format(term=term, rights=listing)
        try:
            payload = await self.client.generate_structured(prompt, SEMANTIC_SCHEMA)
        except AtlasError as exc:
            logger.error("Semantic match failed for %r: %s", term, exc)
            return []
        except Exception:
            logger.exception("Semantic match failed for %r", term)
            return []

        known = {r.id for r in rights}
        ids: list[str] = []
        for item in coerce_id_list(payload):
            if isinstance(item, bool) or not isinstance(item, (str, int)):
                continue
            rid = str(item).strip()
            if rid in known and rid not in ids:
                ids.append(rid)
        return ids

    async def _run(
        self,
        category: RequestCategory,
        subjects: list[str],
        scope: Scope,
        sub_scope: str,
        label: str,
    ) -> DialogueResult:
        state = RetrievalState.IDLE
        try:
            instruction = queries.compose(
                category, subjects, scope, sub_scope, today=self.today
            )

            state = self._enter(RetrievalState.SEARCHING, label)
            response = await self.client.generate_grounded(instruction)

            candidates = extract_candidates(response.chunks)
            state = self._enter(RetrievalState.EXTRACTED, label)

            trusted = self._filter(candidates, category)
            state = self._enter(RetrievalState.FILTERED, label)
            logger.info(
                "%s: %d candidates, %d trusted", label, len(candidates), len(trusted)
            )

            if not trusted:
                self._enter(RetrievalState.EMPTY, label)
                logger.warning(
                    "No trusted sources for %s; available: %s",
                    label, [c.uri for c in candidates],
                )
                return DialogueResult(sources=[])

            state = self._enter(RetrievalState.EXTRACTING, label)
            drafts = await self.extractor.extract(label, response.text, trusted)

            outcome = self.validator.validate(drafts, trusted)
            state = self._enter(RetrievalState.VALIDATED, label)
            if outcome.rejected:
                logger.warning(
                    "%s: rejected %d of %d drafts", label, outcome.rejected, len(drafts)
                )

            self._enter(RetrievalState.DONE, label)
            return DialogueResult(sources=outcome.citations)

        except AtlasError as exc:
            logger.error("%s failed in state %s: %s", label, state.value, exc)
        except Exception:
            logger.exception("%s failed in state %s", label, state.value)

        self._enter(RetrievalState.FAILED, label)
        return degraded_result(category, subjects)

    def _filter(
        self, candidates: list[Candidate], category: RequestCategory
    ) -> list[Candidate]:
        return [c for c in candidates if self.policy.admits(c.uri, category)]

    def _enter(self, state: RetrievalState, label: str) -> RetrievalState:
        logger.debug("%s -> %s", label, state.value)
        return state
