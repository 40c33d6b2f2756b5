from models.schemas.recommendation import RecommendationContext
from services.template_recommendations import (
    TEMPLATES,
    best_free_template,
    best_template_for_role,
    is_premium_worth_it,
    prepare_context,
    recommend_templates,
    recommended_section_order,
)


def test_prepare_context_fills_industry_and_level():
    prepared = prepare_context(RecommendationContext(role="Software Engineer"))
    assert prepared.industry == "technology"
    assert prepared.experience_level == "mid"

    fresher = prepare_context(RecommendationContext(experience_level="senior", flags=["fresher"]))
    assert fresher.experience_level == "fresher"


def test_every_template_is_ranked():
    recs = recommend_templates(RecommendationContext(role="Software Engineer"))
    assert {r.option_id for r in recs} == {t.option_id for t in TEMPLATES}
    assert recs == sorted(recs, key=lambda r: r.score, reverse=True)
    assert all(0 <= r.score <= 100 for r in recs)


def test_mid_level_engineer_prefers_ai_template():
    rec = best_template_for_role("Software Engineer")
    assert rec.option_id == "template2"
    assert rec.score == 85
    assert "Well-suited for technology industry" in rec.reasoning
    assert "Good content density for detailed technical experience" in rec.reasoning


def test_fresher_gets_premium_warning_and_free_pick():
    context = RecommendationContext(role="Software Engineer", flags=["fresher"])
    recs = {r.option_id: r for r in recommend_templates(context)}
    assert "Consider free template first - build strong content before investing" in recs["template2"].warnings
    assert "High ATS compatibility important for entry-level/career change" in recs["template1free"].reasoning
    assert best_free_template(context).option_id == "template1free"


def test_career_changer_values_rewriting():
    recs = recommend_templates(RecommendationContext(flags=["career_changing"]))
    assert recs[0].option_id == "template2"
    assert "AI rewriting helps translate experience to new field" in recs[0].reasoning


def test_keywords_bonus():
    recs = recommend_templates(RecommendationContext(keywords=["python", "aws"]))
    ai = next(r for r in recs if r.option_id == "template2")
    assert "AI rewriting can optimize bullets for job description keywords" in ai.reasoning


def test_region_notes_and_ats_bonus():
    us = recommend_templates(RecommendationContext(role="Software Engineer", region="US"))
    free = next(r for r in us if r.option_id == "template1free")
    assert "Excellent choice - US employers heavily use ATS" in free.reasoning
    assert "ATS compatibility critical in this region" in free.reasoning


def test_photo_region_warning():
    recs = recommend_templates(RecommendationContext(region="DE"))
    assert all("DE typically expects photos - add manually" in r.warnings for r in recs)


def test_premium_worth_it_for_senior():
    verdict = is_premium_worth_it(
        RecommendationContext(role="Software Engineer", experience_level="senior")
    )
    assert verdict.worth_it
    assert "Career level justifies investment in professional presentation" in verdict.reasoning


def test_premium_not_worth_it_for_fresher():
    verdict = is_premium_worth_it(
        RecommendationContext(role="Software Engineer", flags=["fresher"])
    )
    assert not verdict.worth_it
    assert verdict.reasoning[-1].startswith("Focus on building strong content first")


class TestSectionOrder:
    def test_fresher_leads_with_education(self):
        order = recommended_section_order(RecommendationContext(flags=["fresher"]))
        assert order[:2] == ["summary", "education"]

    def test_career_changer_leads_with_skills(self):
        order = recommended_section_order(RecommendationContext(flags=["career_changing"]))
        assert order[:2] == ["summary", "skills"]

    def test_healthcare_leads_with_certifications(self):
        order = recommended_section_order(RecommendationContext(role="Registered Nurse"))
        assert order[1] == "certifications"

    def test_technology_includes_projects_early(self):
        order = recommended_section_order(RecommendationContext(industry="technology"))
        assert order[:3] == ["summary", "experience", "projects"]

    def test_executive(self):
        order = recommended_section_order(RecommendationContext(experience_level="executive"))
        assert "projects" not in order

    def test_default(self):
        order = recommended_section_order(RecommendationContext())
        assert order == ["summary", "experience", "skills", "education", "certifications", "projects"]
