"""Candidate, draft and validated citation models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Candidate:
    """A source surfaced by the search step. Identity is the normalized URI."""

    title: str
    uri: str


@dataclass
class CitationDraft:
    """A citation as proposed by the model. Untrusted until validated.

    ``url_index`` holds whatever the model sent; the validator checks it.
    """

    url_index: Any
    title: str = ""
    year: str = "N/A"
    reference: str = ""


@dataclass(frozen=True)
class Citation:
    """A validated citation; ``uri`` always comes from a trusted candidate."""

    title: str
    uri: str
    date: str
    reference: str

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "uri": self.uri,
            "date": self.date,
            "reference": self.reference,
        }


@dataclass
class DialogueResult:
    """The unit returned to the UI. May be empty."""

    sources: list[Citation] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"sources": [c.to_dict() for c in self.sources]}
