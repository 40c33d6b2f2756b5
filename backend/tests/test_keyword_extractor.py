import pytest

from models.schemas.keywords import CategoryDictionary
from services.keyword_extractor import (
    contains_phrase,
    count_phrase,
    extract,
    extract_keywords,
    find_phrase,
)
from services.lexicons import DEFAULT_DICTIONARY


def test_extract_scenario():
    text = "We need a Python developer with AWS and strong communication skills"
    bag = extract(text, DEFAULT_DICTIONARY)
    assert {"python", "aws"} <= bag.skills
    assert "communication" in bag.soft_skills
    assert "aws" in bag.tools
    assert "aws" not in bag.technologies
    assert "python" in bag.technologies


def test_extract_is_idempotent():
    text = "Python, React, Docker and Kubernetes; agile team player."
    assert extract(text, DEFAULT_DICTIONARY) == extract(text, DEFAULT_DICTIONARY)


def test_single_letter_skill_needs_boundaries():
    dictionary = CategoryDictionary(categories={"skills": ("ruby", "r", "rust")})
    bag = extract("I use Ruby and Rust", dictionary)
    assert bag.skills == frozenset({"ruby", "rust"})


def test_single_letter_skill_standalone():
    dictionary = CategoryDictionary(categories={"skills": ("r",)})
    assert extract("Statistics in R and SAS", dictionary).skills == frozenset({"r"})


def test_java_not_inside_javascript():
    bag = extract_keywords("Frontend work in JavaScript only")
    assert "javascript" in bag.skills
    assert "java" not in bag.skills


def test_symbol_phrases_match():
    bag = extract_keywords("Shipped C++ and C# services, deployed via CI/CD on Node.js")
    assert {"c++", "c#", "ci/cd", "node.js"} <= bag.skills


def test_empty_text_returns_empty_categories():
    bag = extract("   ", DEFAULT_DICTIONARY)
    assert bag.is_empty()
    assert set(bag.categories) >= {"skills", "soft_skills", "tools", "technologies"}


def test_custom_dictionary_is_respected():
    dictionary = CategoryDictionary(categories={"instruments": ("cello", "oboe")})
    bag = extract("Played cello and piano", dictionary)
    assert bag.get("instruments") == frozenset({"cello"})
    assert "tools" not in bag.categories


def test_tool_terms_split_only_tool_category():
    dictionary = CategoryDictionary(
        categories={"skills": ("docker", "python"), "soft_skills": ("docker",)},
        tool_terms=("docker",),
    )
    bag = extract("docker and python", dictionary)
    assert bag.tools == frozenset({"docker"})
    assert bag.technologies == frozenset({"python"})


def test_all_keywords_unions_categories():
    bag = extract_keywords("Python engineer focused on revenue growth and leadership")
    assert {"python", "revenue", "growth", "leadership"} <= bag.all_keywords()


def test_keyword_bag_serializes_sorted_lists():
    bag = extract_keywords("Redis, Docker, AWS")
    dumped = bag.model_dump()
    assert dumped["categories"]["tools"] == sorted(bag.tools)


@pytest.mark.parametrize("text,phrase,expected", [
    ("Experienced in Go and Rust", "go", True),
    ("Google Cloud certified", "go", False),
    ("spring boot microservices", "spring boot", True),
    ("", "python", False),
    ("python", "", False),
])
def test_contains_phrase(text, phrase, expected):
    assert contains_phrase(text, phrase) is expected


def test_find_phrase_returns_first_boundary_hit():
    assert find_phrase("javascript then java", "java") == len("javascript then ")
    assert find_phrase("nothing here", "java") == -1


def test_count_phrase():
    assert count_phrase("Python python PYTHON pythonic", "python") == 3
