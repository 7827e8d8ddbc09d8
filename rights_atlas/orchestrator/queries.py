"""Query composer — category-specific search instructions."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date

from rights_atlas.models.request import RequestCategory, Scope

FIELD_STATUS_ORGANIZATIONS = (
    ("hrw.org", "Human Rights Watch"),
    ("amnesty.org", "Amnesty International"),
    ("ohchr.org", "UN Human Rights"),
)

_REGIONS = (
    (("europe", "european"), "Europe", """
Focus on:
- European Convention on Human Rights (ECHR) - echr.coe.int
- EU Charter of Fundamental Rights - europa.eu
- Council of Europe conventions - coe.int
- European Court of Human Rights case law

Include article numbers and case citations."""),
    (("africa", "african"), "Africa", """
Focus on:
- African Charter on Human and Peoples' Rights - achpr.org
- African Court decisions - african-court.org
- Protocol on the Rights of Women in Africa
- African Charter on the Rights and Welfare of the Child

Include article numbers and relevant decisions."""),
    (("america", "inter-american"), "the Americas", """
Focus on:
- American Convention on Human Rights - corteidh.or.cr
- Inter-American Commission and Court decisions - oas.org/iachr
- American Declaration of the Rights and Duties of Man
- Additional Protocols

Include article numbers and case law."""),
    (("asia", "asean"), "Asia", """
Focus on:
- ASEAN Human Rights Declaration - asean.org
- ASEAN Intergovernmental Commission on Human Rights
- Regional mechanisms and specialized conventions

Include relevant provisions and mechanisms."""),
)

_ALL_REGIONS = """
Search across all regional systems:
- European Convention on Human Rights (echr.coe.int)
- African Charter on Human and Peoples' Rights (achpr.org)
- American Convention on Human Rights (corteidh.or.cr)
- ASEAN Human Rights Declaration (asean.org)

Include article numbers and relevant provisions."""


def _international(right: str) -> str:
    return f"""Search for INTERNATIONAL legal instruments protecting "{right}".

Focus on:
- UN treaties and conventions (treaties.un.org, ohchr.org)
- Universal Declaration of Human Rights (UDHR)
- International Covenant on Civil and Political Rights (ICCPR)
- International Covenant on Economic, Social and Cultural Rights (ICESCR)
- Convention on the Rights of the Child (CRC)
- Convention on the Elimination of All Forms of Discrimination Against Women (CEDAW)
- Other UN human rights treaties

Include full official names with adoption years and specific article numbers."""


def _regional(right: str, sub_scope: str) -> str:
    head = f'Search for REGIONAL legal instruments protecting "{right}"'
    region = sub_scope.lower()
    if not region:
        return head + "." + _ALL_REGIONS
    for keys, label, body in _REGIONS:
        if any(k in region for k in keys):
            return f"{head} in {label}.{body}"
    # Unrecognised region: mention it, but stay generic.
    return f"""{head} relevant to {sub_scope}.

Look for regional human rights systems including:
- European (ECHR, EU Charter)
- African (African Charter)
- Inter-American (American Convention)
- ASEAN (ASEAN Declaration)

Include specific regional instruments and article numbers."""


def _national(right: str, sub_scope: str) -> str:
    if sub_scope:
        return f"""Search for NATIONAL laws and constitutional provisions protecting "{right}" in {sub_scope}.

Focus on:
- National constitution (constituteproject.org, constitution.org)
- Domestic legislation (.gov, .gob, official legislation sites)
- Bill of Rights or equivalent
- Specific statutes and laws
- Supreme Court or Constitutional Court decisions

Use official government sources (.gov, .gob, .gc.ca, .gov.uk, etc.)
Include constitutional article numbers and statute names with years."""
    return f"""Search for examples of NATIONAL laws protecting "{right}" across different countries.

Focus on:
- Constitutional provisions (constituteproject.org)
- National legislation from various countries
- Comparative constitutional law
- Model national laws

Include specific country examples with constitutional articles and statute names."""


def legal_framework_query(right: str, scope: Scope, sub_scope: str = "") -> str:
    sub_scope = sub_scope.strip()
    if scope is Scope.INTERNATIONAL:
        return _international(right)
    if scope is Scope.REGIONAL:
        return _regional(right, sub_scope)
    return _national(right, sub_scope)


def field_status_query(
    right: str, scope: Scope, sub_scope: str = "", today: date | None = None
) -> str:
    """Recent monitoring reports, restricted to the named organizations."""
    year = (today or date.today()).year
    where = sub_scope.strip() or "the world"
    level = "country-level" if sub_scope.strip() else f"{scope.value.lower()} and world-level"
    domains = "\n".join(f"- {d} ({name})" for d, name in FIELD_STATUS_ORGANIZATIONS)
    return f"""Search for recent {level} reports ({year - 1}-{year}) on "{right}" in {where}.

ONLY use sources from these domains:
{domains}

Find:
- Recent published reports with dates
- Country-specific assessments
- Key findings about violations or progress
- Statistical data

Include direct quotes and explicit findings from the reports."""


def nexus_query(right_a: str, right_b: str, scope: Scope, sub_scope: str = "") -> str:
    """Academic work discussing both rights together."""
    focus = f"\nGeographic focus: {sub_scope.strip()} ({scope.value})." if sub_scope.strip() else ""
    return f"""Search for peer-reviewed or open-access academic research on the intersection between "{right_a}" and "{right_b}".

Search query to use: "{right_a}" AND "{right_b}" human rights intersection{focus}

PRIORITY SOURCES (in order):
1. Google Scholar results (scholar.google.com)
2. Open access repositories (.edu, ResearchGate, Academia.edu)
3. SSRN and arXiv preprints
4. Government research papers (.gov)
5. PubMed Central open access (ncbi.nlm.nih.gov/pmc)

DO NOT USE:
- Paywalled journals (JSTOR, Springer, ScienceDirect, Wiley, Taylor & Francis)
- Abstract-only pages
- Citation-only pages

For each paper, include:
- Full title with year
- Author(s) if available
- How the two rights intersect or interact
- Key findings or arguments

Only include papers that explicitly discuss both rights together."""


def compose(
    category: RequestCategory,
    rights: Sequence[str],
    scope: Scope,
    sub_scope: str = "",
    today: date | None = None,
) -> str:
    """Build the search instruction for ``category``.

    ``rights`` holds one name, or two for ``NEXUS``.
    """
    if category is RequestCategory.NEXUS:
        if len(rights) != 2:
            raise ValueError("Nexus queries need exactly two rights")
        return nexus_query(rights[0], rights[1], scope, sub_scope)
    if len(rights) != 1:
        raise ValueError(f"{category.value} queries need exactly one right")
    if category is RequestCategory.LEGAL_FRAMEWORK:
        return legal_framework_query(rights[0], scope, sub_scope)
    return field_status_query(rights[0], scope, sub_scope, today=today)
