"""Human-rights catalog entry."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class RightCategory(Enum):
    CIVIL = "civil"
    POLITICAL = "political"
    ECONOMIC = "economic"
    SOCIAL = "social"
    CULTURAL = "cultural"


@dataclass(frozen=True)
class Right:
    """An immutable catalog entry for one article."""

    id: str
    name: str
    summary: str
    category: RightCategory
