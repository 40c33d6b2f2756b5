import pytest

from services.role_classifier import (
    correct_role,
    categorize_role,
    detect_industry,
    detect_industry_from_title,
    find_role,
    fuzzy_score,
    levenshtein_distance,
    normalize,
    rank_roles,
    suggest_roles,
)
from services.role_database import COMMON_ROLES, ROLE_TAXONOMY


class TestLevenshtein:
    @pytest.mark.parametrize("a,b,expected", [
        ("kitten", "sitting", 3),
        ("", "", 0),
        ("abc", "abc", 0),
        ("", "abc", 3),
        ("flaw", "lawn", 2),
    ])
    def test_distance(self, a, b, expected):
        assert levenshtein_distance(a, b) == expected

    def test_symmetric(self):
        assert levenshtein_distance("devops", "devpos") == levenshtein_distance("devpos", "devops")


def test_normalize():
    assert normalize("  Full-Stack   Developer! ") == "full stack developer"
    assert normalize("AI/ML") == "ai ml"


class TestFuzzyScore:
    def test_exact(self):
        assert fuzzy_score("software engineer", "Software Engineer") == 100

    def test_substring(self):
        assert fuzzy_score("data", "Data Scientist") == 85

    def test_word_prefix(self):
        assert fuzzy_score("soft eng", "Software Engineer") == 70

    def test_abbreviation(self):
        assert fuzzy_score("swe", "Software Engineer") == 65

    def test_close_typo(self):
        assert fuzzy_score("Tutorr", "Tutor") == 60

    def test_unrelated(self):
        assert fuzzy_score("plumber", "Data Scientist") == 0

    def test_empty(self):
        assert fuzzy_score("", "Data Scientist") == 0


def test_swe_suggests_software_engineer_first():
    ranked = rank_roles("swe")
    assert ranked[0][0] == "Software Engineer"
    assert ranked[0][1] >= 65


def test_suggest_roles_respects_limit():
    results = suggest_roles("engineer", limit=3)
    assert len(results) == 3
    assert all("Engineer" in r for r in results)


def test_suggest_roles_ties_keep_taxonomy_order():
    taxonomy = ["Zeta Analyst", "Alpha Analyst", "Beta Analyst"]
    assert suggest_roles("analyst", taxonomy=taxonomy) == taxonomy


def test_suggest_roles_empty_query_returns_common_roles():
    assert suggest_roles("", limit=5) == list(COMMON_ROLES[:5])


def test_suggest_roles_no_match_falls_back():
    assert suggest_roles("qqqqqqqqqqqq", limit=4) == list(COMMON_ROLES[:4])


def test_suggest_roles_non_positive_limit():
    assert suggest_roles("engineer", limit=0) == []


def test_taxonomy_has_no_duplicates():
    assert len(ROLE_TAXONOMY) == len(set(ROLE_TAXONOMY))


class TestCorrectRole:
    def test_corrects_typo(self):
        assert correct_role("Sofware Engineer") == "Software Engineer"

    def test_short_input_not_corrected(self):
        assert correct_role("swe") is None

    def test_too_far_is_none(self):
        assert correct_role("completely unrelated words") is None

    def test_short_word_threshold(self):
        # 5 characters allow at most 2 edits
        assert correct_role("Tutor", ["Tator"]) == "Tator"
        assert correct_role("Tutor", ["Taxes"]) is None


class TestFindRole:
    def test_by_name(self):
        assert find_role("Software Engineer").id == "software-engineer"

    def test_by_alias(self):
        assert find_role("RN").id == "registered-nurse"

    def test_by_containment(self):
        assert find_role("nurse").id == "registered-nurse"

    def test_by_correction(self):
        assert find_role("Sofware Enginer").id == "software-engineer"

    def test_unknown(self):
        assert find_role("zzzz zzzz") is None
        assert find_role("") is None


class TestDetectIndustry:
    def test_technology(self):
        text = "Python and React developer deploying Docker containers to AWS"
        assert detect_industry(text) == "technology"

    def test_healthcare(self):
        text = "Provide patient care, medication administration and triage in a clinical setting"
        assert detect_industry(text) == "healthcare"

    def test_tie_is_other(self):
        keywords = {"alpha": ["apple"], "beta": ["banana"]}
        assert detect_industry("apple banana", keywords) == "other"

    def test_no_hits_is_other(self):
        assert detect_industry("lorem ipsum", {"alpha": ["apple"]}) == "other"
        assert detect_industry("") == "other"

    def test_injected_table(self):
        keywords = {"alpha": ["apple", "apricot"], "beta": ["banana"]}
        assert detect_industry("apple apricot banana", keywords) == "alpha"


@pytest.mark.parametrize("title,industry", [
    ("Senior Software Engineer", "technology"),
    ("Registered Nurse", "healthcare"),
    ("Chief Vibes Officer of Nothing", "other"),
])
def test_detect_industry_from_title(title, industry):
    assert detect_industry_from_title(title) == industry


def test_categorize_role():
    assert categorize_role("Zookeeper") == "Other"
    assert categorize_role("Data Scientist") != "Other"
