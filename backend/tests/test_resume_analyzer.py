import pytest

from services.resume_analyzer import W_KEYWORD, W_STRUCTURE, _compute_overall, analyze


@pytest.mark.scenario
def test_analyze_with_job_description(sample_resume, sample_jd):
    result = analyze(sample_resume, sample_jd)
    assert result.scoring_method == "keyword"
    assert result.jd_analysis is not None
    assert result.jd_analysis.detected_role == "Senior Backend Engineer"
    assert result.comparison is not None
    assert "python" in result.matched_keywords
    assert "kubernetes" in result.missing_keywords
    assert result.score_breakdown.structure == 100
    assert result.overall_score == round(
        W_KEYWORD * result.score_breakdown.keywords_match + W_STRUCTURE * 100
    )
    assert set(result.keyword_density) == set(result.matched_keywords + result.missing_keywords)
    assert result.strengths[0].startswith("Matched keyword: ")
    assert "Missing keyword: kubernetes" in result.weaknesses
    assert "Senior Backend Engineer" in result.summary


@pytest.mark.scenario
def test_analyze_without_job_description(sample_resume):
    result = analyze(sample_resume, "   ")
    assert result.scoring_method == "strength"
    assert result.jd_analysis is None
    assert result.comparison is None
    assert result.overall_score == result.structure.score == 100
    assert "python" in result.matched_keywords
    assert result.missing_keywords == []
    assert result.summary.startswith("Resume-only review")


def test_analyze_empty_resume():
    result = analyze("", "")
    assert result.overall_score == 0
    assert result.matched_keywords == []
    assert result.weaknesses


def test_missing_requirements_are_weaknesses():
    jd = "Data Analyst\nRequires 5+ years of experience and a bachelor's degree. SQL required."
    result = analyze("Skills: SQL", jd)
    assert "Experience requirement not evidenced in resume" in result.weaknesses
    assert "Education requirement not evidenced in resume" in result.weaknesses


def test_compute_overall_is_clamped():
    assert _compute_overall(100, 100) == 100
    assert _compute_overall(0, 0) == 0
    assert _compute_overall(67, 100) == 77
