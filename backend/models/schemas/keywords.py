"""Keyword dictionaries and the records produced by lexicon matching."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, field_serializer


class Importance(str, Enum):
    REQUIRED = "required"
    PREFERRED = "preferred"
    NICE_TO_HAVE = "nice_to_have"


class CategoryDictionary(BaseModel):
    """Named phrase lists keyed by category.

    Phrases are lowercase. Any phrase found under ``tool_category`` is
    additionally filed under ``tools`` when it contains one of
    ``tool_terms``, otherwise under ``technologies``.
    """
    model_config = ConfigDict(frozen=True)

    categories: dict[str, tuple[str, ...]]
    tool_terms: tuple[str, ...] = ()
    tool_category: str = "skills"


class ExtractedKeyword(BaseModel):
    model_config = ConfigDict(frozen=True)

    phrase: str
    category: str
    importance: Importance = Importance.PREFERRED
    source_context: str = ""  # sentence snippet, at most 150 chars


class KeywordBag(BaseModel):
    """Category name -> phrases found. Frozen once built."""
    model_config = ConfigDict(frozen=True)

    categories: dict[str, frozenset[str]] = {}

    @field_serializer("categories")
    def _sorted_categories(self, categories: dict[str, frozenset[str]]) -> dict[str, list[str]]:
        return {name: sorted(phrases) for name, phrases in categories.items()}

    def get(self, category: str) -> frozenset[str]:
        return self.categories.get(category, frozenset())

    @property
    def skills(self) -> frozenset[str]:
        return self.get("skills")

    @property
    def tools(self) -> frozenset[str]:
        return self.get("tools")

    @property
    def technologies(self) -> frozenset[str]:
        return self.get("technologies")

    @property
    def soft_skills(self) -> frozenset[str]:
        return self.get("soft_skills")

    @property
    def role_keywords(self) -> frozenset[str]:
        return self.get("role_keywords")

    @property
    def business_terms(self) -> frozenset[str]:
        return self.get("business_terms")

    def all_keywords(self) -> frozenset[str]:
        found: set[str] = set()
        for phrases in self.categories.values():
            found |= phrases
        return frozenset(found)

    def is_empty(self) -> bool:
        return not any(self.categories.values())
