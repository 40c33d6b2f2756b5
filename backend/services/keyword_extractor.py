"""Lexicon-based keyword extraction.

Every dictionary phrase is tested against a lowercase copy of the input
with phrase boundaries on both sides, so "r" never matches inside
"ruby" and "java" never matches inside "javascript".
"""

import logging
import re
from functools import lru_cache

from models.schemas.keywords import CategoryDictionary, KeywordBag
from services.lexicons import DEFAULT_DICTIONARY

logger = logging.getLogger(__name__)


@lru_cache(maxsize=4096)
def phrase_pattern(phrase: str) -> re.Pattern:
    """Compile a boundary-anchored pattern for a lowercase phrase."""
    escaped = re.escape(phrase.lower())
    return re.compile(rf"(?<![a-z0-9]){escaped}(?![a-z0-9])")


def contains_phrase(text: str, phrase: str) -> bool:
    """True if ``phrase`` appears in ``text`` as a whole word or phrase."""
    if not phrase:
        return False
    return phrase_pattern(phrase).search(text.lower()) is not None


def find_phrase(text: str, phrase: str) -> int:
    """Index of the first whole-phrase occurrence in lowercase text, or -1."""
    if not phrase:
        return -1
    match = phrase_pattern(phrase).search(text.lower())
    return match.start() if match else -1


def count_phrase(text: str, phrase: str) -> int:
    if not phrase:
        return 0
    return len(phrase_pattern(phrase).findall(text.lower()))


def extract(text: str, dictionary: CategoryDictionary) -> KeywordBag:
    """Collect every dictionary phrase present in ``text``, per category.

    Phrases from ``dictionary.tool_category`` are also split into
    ``tools`` (contains a tool term) or ``technologies`` (everything else).
    """
    lower = text.lower()
    found: dict[str, set[str]] = {name: set() for name in dictionary.categories}
    if dictionary.tool_terms:
        found.setdefault("tools", set())
        found.setdefault("technologies", set())

    if not lower.strip():
        return KeywordBag(categories={k: frozenset(v) for k, v in found.items()})

    for category, phrases in dictionary.categories.items():
        for phrase in phrases:
            if phrase_pattern(phrase).search(lower) is None:
                continue
            found[category].add(phrase)
            if dictionary.tool_terms and category == dictionary.tool_category:
                if any(term in phrase for term in dictionary.tool_terms):
                    found["tools"].add(phrase)
                else:
                    found["technologies"].add(phrase)

    logger.debug(
        "Extracted %d keywords across %d categories",
        sum(len(v) for v in found.values()), len(found),
    )
    return KeywordBag(categories={k: frozenset(v) for k, v in found.items()})


def extract_keywords(text: str) -> KeywordBag:
    """Extract keywords using the built-in technical/soft/role/business lexicons."""
    return extract(text, DEFAULT_DICTIONARY)
