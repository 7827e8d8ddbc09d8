"""Request parameters shared by the retrieval operations."""

from __future__ import annotations

from enum import Enum


class Scope(Enum):
    INTERNATIONAL = "International"
    REGIONAL = "Regional"
    NATIONAL = "National"


class RequestCategory(Enum):
    """Selects the query template and the domain-trust policy."""

    LEGAL_FRAMEWORK = "LegalFramework"
    FIELD_STATUS = "FieldStatus"
    NEXUS = "Nexus"
