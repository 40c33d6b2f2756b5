import pytest

from models.schemas.jd_analysis import SeniorityLevel, Urgency
from models.schemas.keywords import Importance
from services.jd_parser import (
    FEW_RESPONSIBILITIES_WARNING,
    FEW_SKILLS_WARNING,
    NO_TITLE_WARNING,
    detect_role_type,
    detect_seniority,
    detect_urgency,
    extract_location,
    extract_responsibilities,
    extract_title,
    parse_job_description,
    split_core_and_nice,
    split_sentences,
)


class TestParseSample:
    @pytest.fixture
    def parsed(self, sample_jd):
        return parse_job_description(sample_jd)

    def test_title_and_role(self, parsed):
        assert parsed.detected_role == "Senior Backend Engineer"
        assert parsed.role_type == "Senior Backend Engineer"

    def test_seniority(self, parsed):
        assert parsed.seniority_level == SeniorityLevel.SENIOR
        assert "Mentorship responsibilities" in parsed.seniority_signals

    def test_industry(self, parsed):
        assert parsed.industry == "technology"

    def test_core_and_nice_to_have(self, parsed):
        assert parsed.core_skills == ["python", "sql", "aws", "docker"]
        assert parsed.nice_to_have == ["kubernetes", "terraform", "kafka"]

    def test_hard_skill_importance(self, parsed):
        by_phrase = {k.phrase: k for k in parsed.hard_skills}
        assert by_phrase["python"].importance == Importance.REQUIRED
        assert "required" in by_phrase["python"].source_context

    def test_requirements(self, parsed):
        assert parsed.education_requirements
        assert any("5+ years" in req for req in parsed.experience_requirements)

    def test_metadata(self, parsed):
        assert parsed.location == "Austin, TX"
        assert parsed.is_remote
        assert parsed.salary_mentioned
        assert parsed.urgency == Urgency.LOW

    def test_responsibilities(self, parsed):
        assert len(parsed.responsibilities) == 3
        assert parsed.responsibilities[0].startswith("You will design")

    def test_confidence_and_warnings(self, parsed):
        assert parsed.confidence == 95
        assert parsed.warnings == []

    def test_keyword_bag_present(self, parsed):
        assert {"python", "docker", "kafka"} <= parsed.keywords.skills


def test_empty_description():
    parsed = parse_job_description("")
    assert parsed.confidence <= 50
    assert not parsed.role_type
    assert not parsed.detected_role
    assert parsed.seniority_level == SeniorityLevel.UNKNOWN
    assert parsed.warnings == [FEW_SKILLS_WARNING, FEW_RESPONSIBILITIES_WARNING, NO_TITLE_WARNING]


def test_untitled_description_falls_back_to_role_type():
    parsed = parse_job_description("We need someone for our React web app")
    assert parsed.detected_role is None
    assert parsed.role_type == "Frontend Developer"
    assert NO_TITLE_WARNING in parsed.warnings


def test_unclassifiable_description_is_general():
    assert parse_job_description("Come join our friendly team").role_type == "General"


class TestSeniority:
    def test_senior_keyword_beats_years(self):
        level, signals = detect_seniority("Senior engineer with 3-5 years of experience")
        assert level == SeniorityLevel.SENIOR
        assert signals[0] == "Title contains senior/staff/principal"

    def test_lead(self):
        assert detect_seniority("Engineering manager for the payments team")[0] == SeniorityLevel.LEAD

    def test_entry(self):
        assert detect_seniority("Junior developer, 0-2 years")[0] == SeniorityLevel.ENTRY

    def test_years_mid(self):
        assert detect_seniority("Requires 4 years experience")[0] == SeniorityLevel.MID

    def test_years_senior(self):
        assert detect_seniority("Requires 8+ years experience")[0] == SeniorityLevel.SENIOR

    def test_unknown(self):
        level, signals = detect_seniority("Friendly team")
        assert level == SeniorityLevel.UNKNOWN
        assert signals == []

    def test_independent_signals(self):
        _, signals = detect_seniority("Work with stakeholders and architect new services")
        assert signals == ["Architecture responsibilities", "Cross-functional collaboration"]


class TestTitle:
    def test_heading(self):
        assert extract_title("Staff Data Analyst\nAbout the team") == "Staff Data Analyst"

    def test_label(self):
        assert extract_title("Job Title: Data Analyst\nwe crunch numbers") == "Data Analyst"

    def test_label_requires_colon(self):
        assert extract_title("the position is open") is None

    def test_too_short(self):
        assert extract_title("role: QA") is None


@pytest.mark.parametrize("text,expected", [
    ("We build React interfaces", "Frontend Developer"),
    ("Own the microservices platform", "Backend Developer"),
    ("Build quick tools", None),
])
def test_detect_role_type(text, expected):
    assert detect_role_type(text) == expected


def test_urgency_high_wins():
    assert detect_urgency("Hiring soon, start immediately") == Urgency.HIGH
    assert detect_urgency("We hope to fill this soon") == Urgency.MEDIUM


def test_extract_location_city_list():
    assert extract_location("Our office in london is lovely") == "london"
    assert extract_location("no place given") is None


def test_split_sentences_drops_short_fragments():
    assert split_sentences("Hi. This sentence is long enough!\nOk") == ["This sentence is long enough"]


def test_extract_responsibilities_strips_bullets():
    sentences = [
        "- Design scalable data pipelines for analytics",
        "short one here",
        "The office has a view of the river",
    ]
    assert extract_responsibilities(sentences) == ["Design scalable data pipelines for analytics"]


def test_split_core_and_nice_is_positional():
    lower = "python is required. go is preferred. rust is a bonus."
    core, nice = split_core_and_nice(lower, {"python", "go", "rust"})
    assert core == ["python", "go"]
    assert nice == ["rust"]


def test_split_core_and_nice_without_marker():
    core, nice = split_core_and_nice("python and sql", {"sql", "python"})
    assert core == ["python", "sql"]
    assert nice == []
