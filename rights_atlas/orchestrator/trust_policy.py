"""Domain trust and accessibility policy for grounding candidates.

Patterns come in four shapes:

- ``"ohchr.org"``: a registrable domain; matches the host or any subdomain.
- ``".gov"``: a label suffix; matches when those labels end the host, or
  sit just before a two-letter country code, and are never the first label.
  So ``.gov`` covers ``nih.gov`` and ``service.gov.uk`` but not
  ``gov.example.com``.
- ``"/pdf"``: a path fragment; matches anywhere in the URL path.
- ``"ncbi.nlm.nih.gov/pmc"``: a domain plus path prefix.

Anything else (``"openaccess"``) is a plain substring of the whole URL.
Everything is lowercased and the policy holds no state.
"""

from __future__ import annotations

from urllib.parse import urlsplit

from rights_atlas.models.request import RequestCategory

TRUSTED_DOMAINS: dict[RequestCategory, tuple[str, ...]] = {
    RequestCategory.LEGAL_FRAMEWORK: (
        # International
        "un.org", "ohchr.org", "unicef.org", "unesco.org", "who.int", "ilo.org",
        "icj-cij.org", "unhcr.org", "refworld.org",
        # Regional
        "echr.coe.int", "coe.int", "achpr.org", "african-court.org",
        "corteidh.or.cr", "oas.org", "iachr.org", "asean.org",
        "europarl.europa.eu", "europa.eu",
        # National
        ".gov", ".gob", ".gouv", ".gc.ca", ".gov.uk", ".gov.au",
        "legislation.gov.uk", "legifrance.gouv.fr", "gesetze-im-internet.de",
        "constitution.org", "constituteproject.org",
    ),
    RequestCategory.FIELD_STATUS: (
        "hrw.org", "amnesty.org", "ohchr.org", "icrc.org",
        "humanrightsfirst.org", "article19.org", "fidh.org",
    ),
    RequestCategory.NEXUS: (
        "scholar.google.com", "researchgate.net", "academia.edu", "ssrn.com",
        "arxiv.org", "philpapers.org", "semanticscholar.org", "europepmc.org",
        "ncbi.nlm.nih.gov", "doaj.org", "core.ac.uk",
        ".edu", ".gov",
    ),
}

ACCESSIBLE_PATTERNS: tuple[str, ...] = (
    "scholar.google.com", "researchgate.net", "academia.edu", "ssrn.com",
    "arxiv.org", "philpapers.org", "semanticscholar.org", "europepmc.org",
    "ncbi.nlm.nih.gov/pmc", "doaj.org", "core.ac.uk",
    ".edu", "/pdf", "openaccess",
)

PAYWALL_PATTERNS: tuple[str, ...] = (
    "jstor.org", "springer.com", "link.springer.com", "sciencedirect.com",
    "tandfonline.com", "wiley.com", "cambridge.org/core/journals",
    "oxfordjournals.org", "academic.oup.com",
    "/abstract", "/citation",
)


def _split(uri: str) -> tuple[str, str, str]:
    """Return ``(host, path, whole)`` lowercased; tolerates missing schemes."""
    whole = uri.strip().lower()
    try:
        parts = urlsplit(whole)
        if not parts.netloc:
            parts = urlsplit("//" + whole)
    except ValueError:
        return "", "", whole
    host = (parts.hostname or "").rstrip(".")
    return host, parts.path, whole


def _host_matches(host: str, domain: str) -> bool:
    return host == domain or host.endswith("." + domain)


def _suffix_matches(host: str, suffix: str) -> bool:
    labels = host.split(".")
    wanted = suffix.strip(".").split(".")
    size = len(wanted)
    for start in range(1, len(labels) - size + 1):
        if labels[start:start + size] != wanted:
            continue
        rest = labels[start + size:]
        if not rest or (len(rest) == 1 and len(rest[0]) == 2):
            return True
    return False


def matches_pattern(uri: str, pattern: str) -> bool:
    """Test a single policy pattern against ``uri``."""
    host, path, whole = _split(uri)
    pattern = pattern.lower()

    if pattern.startswith("/"):
        return pattern in path
    if pattern.startswith("."):
        return _suffix_matches(host, pattern)
    if "." in pattern:
        domain, slash, prefix = pattern.partition("/")
        if not _host_matches(host, domain):
            return False
        return not slash or path.startswith("/" + prefix)
    return pattern in whole


class DomainTrustPolicy:
    """Category-aware classifier over candidate URLs."""

    def __init__(
        self,
        trusted: dict[RequestCategory, tuple[str, ...]] | None = None,
        accessible: tuple[str, ...] = ACCESSIBLE_PATTERNS,
        paywalled: tuple[str, ...] = PAYWALL_PATTERNS,
    ) -> None:
        self.trusted = trusted if trusted is not None else TRUSTED_DOMAINS
        self.accessible = accessible
        self.paywalled = paywalled

    def is_trusted(self, uri: str, category: RequestCategory) -> bool:
        return any(matches_pattern(uri, p) for p in self.trusted.get(category, ()))

    def is_accessible(self, uri: str) -> bool:
        """Open-access heuristic: an allow pattern hits and no paywall pattern does."""
        if any(matches_pattern(uri, p) for p in self.paywalled):
            return False
        return any(matches_pattern(uri, p) for p in self.accessible)

    def admits(self, uri: str, category: RequestCategory) -> bool:
        """Whether ``uri`` may be offered to the model for ``category``.

        Official and NGO sources are taken as openly readable, so only
        academic (``NEXUS``) candidates go through the accessibility check.
        """
        if not self.is_trusted(uri, category):
            return False
        if category is RequestCategory.NEXUS:
            return self.is_accessible(uri)
        return True
