"""Fuzzy role matching, spelling correction, and industry voting.

Nothing here raises on odd input: an unmatched role resolves to ``None``
(or the common-role list for suggestions) and an unmatched industry to
``"other"``.
"""

import logging
import re
from collections.abc import Mapping, Sequence

from rapidfuzz.distance import Levenshtein

from models.schemas.roles import RoleDefinition
from services.keyword_extractor import contains_phrase
from services.role_database import (
    ABBREVIATIONS,
    COMMON_ROLES,
    INDUSTRY_KEYWORDS,
    INDUSTRY_TITLE_RULES,
    ROLE_CATEGORY_RULES,
    ROLE_DEFINITIONS,
    ROLE_TAXONOMY,
)

logger = logging.getLogger(__name__)

DEFAULT_INDUSTRY = "other"
DEFAULT_CATEGORY = "Other"

EXACT_SCORE = 100
CONTAINS_SCORE = 85
PREFIX_SCORE = 70
ABBREVIATION_SCORE = 65

_NON_ALNUM_RE = re.compile(r"[^a-z0-9\s]")
_WHITESPACE_RE = re.compile(r"\s+")


def normalize(text: str) -> str:
    """Lowercase, turn punctuation into spaces, collapse whitespace, trim."""
    text = _NON_ALNUM_RE.sub(" ", text.lower())
    return _WHITESPACE_RE.sub(" ", text).strip()


def levenshtein_distance(a: str, b: str) -> int:
    """Unit-cost insert/delete/substitute edit distance."""
    return Levenshtein.distance(a, b)


def fuzzy_score(query: str, candidate: str) -> int:
    """Score how well a free-text role query matches a canonical title.

    Both arguments are normalized first. Returns 0 when the candidate
    should not be suggested at all.
    """
    q = normalize(query)
    c = normalize(candidate)
    if not q or not c:
        return 0

    if q == c:
        return EXACT_SCORE
    if q in c:
        return CONTAINS_SCORE

    candidate_words = c.split()
    for word in q.split():
        if len(word) >= 2 and any(cw.startswith(word) for cw in candidate_words):
            return PREFIX_SCORE

    expansions = ABBREVIATIONS.get(q, ())
    if any(expansion in c for expansion in expansions):
        return ABBREVIATION_SCORE

    distance = levenshtein_distance(q, c)
    if distance <= 2:
        return 60
    if distance <= 3:
        return 50
    return 0


def rank_roles(
    query: str, taxonomy: Sequence[str] = ROLE_TAXONOMY
) -> list[tuple[str, int]]:
    """All taxonomy entries with a non-zero score, best first.

    ``sorted`` is stable, so equal scores keep taxonomy order.
    """
    scored = [(role, fuzzy_score(query, role)) for role in taxonomy]
    scored = [item for item in scored if item[1] > 0]
    return sorted(scored, key=lambda item: item[1], reverse=True)


def suggest_roles(
    query: str, limit: int = 20, taxonomy: Sequence[str] = ROLE_TAXONOMY
) -> list[str]:
    """Role titles matching ``query``, or the common roles when nothing does."""
    if limit <= 0:
        return []
    if not normalize(query):
        return list(COMMON_ROLES[:limit])

    ranked = rank_roles(query, taxonomy)
    if not ranked:
        logger.debug("No role suggestions for %r, using common roles", query)
        return list(COMMON_ROLES[:limit])
    return [role for role, _ in ranked[:limit]]


def correct_role(
    query: str, taxonomy: Sequence[str] = ROLE_TAXONOMY
) -> str | None:
    """Nearest taxonomy title for a misspelled role, if close enough.

    Inputs shorter than 4 characters are never corrected. Longer inputs
    accept a distance of 3 from 8 characters up, 2 below that.
    """
    q = normalize(query)
    if len(q) < 4:
        return None

    best_role = None
    best_distance = None
    for role in taxonomy:
        distance = levenshtein_distance(q, normalize(role))
        if best_distance is None or distance < best_distance:
            best_role, best_distance = role, distance

    if best_role is None:
        return None
    threshold = 3 if len(q) >= 8 else 2
    if best_distance <= threshold:
        return best_role
    return None


def _role_names(role: RoleDefinition) -> list[str]:
    return [normalize(role.name)] + [normalize(alias) for alias in role.aliases]


def find_role(
    query: str, roles: Sequence[RoleDefinition] = ROLE_DEFINITIONS
) -> RoleDefinition | None:
    """Look up a role definition by name, alias, containment, or spelling fix."""
    q = normalize(query)
    if not q:
        return None

    for role in roles:
        if q in _role_names(role):
            return role

    for role in roles:
        for name in _role_names(role):
            if q in name or contains_phrase(q, name):
                return role

    corrected = correct_role(q, [role.name for role in roles] + [
        alias for role in roles for alias in role.aliases
    ])
    if corrected:
        target = normalize(corrected)
        for role in roles:
            if target in _role_names(role):
                logger.debug("Resolved role %r via correction %r", query, corrected)
                return role
    return None


def detect_industry(
    text: str, industry_keywords: Mapping[str, Sequence[str]] = INDUSTRY_KEYWORDS
) -> str:
    """Vote an industry by counting keyword substring hits.

    A tie for the top count, or no hits at all, yields ``"other"``.
    """
    lower = text.lower()
    if not lower.strip():
        return DEFAULT_INDUSTRY

    counts = {
        industry: sum(1 for kw in keywords if kw.lower() in lower)
        for industry, keywords in industry_keywords.items()
    }
    if not counts:
        return DEFAULT_INDUSTRY

    best = max(counts.values())
    if best == 0:
        return DEFAULT_INDUSTRY
    leaders = [industry for industry, count in counts.items() if count == best]
    if len(leaders) > 1:
        logger.debug("Industry tie between %s", leaders)
        return DEFAULT_INDUSTRY
    return leaders[0]


def detect_industry_from_title(title: str) -> str:
    """Industry for a short job title, via the ordered title rule table."""
    lower = title.lower()
    for pattern, industry in INDUSTRY_TITLE_RULES:
        if pattern.search(lower):
            return industry
    return DEFAULT_INDUSTRY


def categorize_role(role: str) -> str:
    """Coarse role family such as "Software" or "Data"."""
    lower = role.lower()
    for pattern, family in ROLE_CATEGORY_RULES:
        if pattern.search(lower):
            return family
    return DEFAULT_CATEGORY
