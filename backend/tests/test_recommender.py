from models.schemas.recommendation import RecommendationContext, ScoringOption
from services.recommender import (
    DEFAULT_SCORER,
    BonusOutcome,
    FitFactor,
    WeightedScorer,
    rank_options,
)


def _option(option_id: str, industry_fit: int = 50, level_fit: int = 50, **kwargs) -> ScoringOption:
    return ScoringOption(
        option_id=option_id,
        name=option_id.title(),
        fit={"industry": {"technology": industry_fit}, "level": {"mid": level_fit}},
        **kwargs,
    )


TECH_MID = RecommendationContext(industry="technology", experience_level="mid")


def test_identical_options_tie_and_keep_order():
    options = [_option("first", 80, 80), _option("second", 80, 80), _option("third", 80, 80)]
    ranked = rank_options(options, TECH_MID)
    assert [r.option_id for r in ranked] == ["first", "second", "third"]
    assert len({r.score for r in ranked}) == 1


def test_weighted_fit_score():
    # 50 + (90 - 50) * 0.30 + (70 - 50) * 0.25 = 67
    rec = DEFAULT_SCORER.score(_option("a", 90, 70), TECH_MID)
    assert rec.score == 67
    assert rec.reasoning == ["Well-suited for technology industry"]


def test_low_fit_messages_go_to_buckets():
    rec = DEFAULT_SCORER.score(_option("a", 40, 40), TECH_MID)
    assert rec.warnings[0] == "May not be ideal for technology roles"
    assert rec.suggestions == ["Consider alternatives for mid-level positions"]


def test_missing_context_values_are_skipped():
    rec = DEFAULT_SCORER.score(_option("a", 100, 100), RecommendationContext())
    assert rec.score == 50
    assert rec.reasoning == []


def test_ranking_orders_best_first():
    ranked = rank_options([_option("low", 40, 40), _option("high", 95, 95)], TECH_MID)
    assert [r.option_id for r in ranked] == ["high", "low"]


def test_strengths_and_limitations_thresholds():
    strong = _option("strong", 100, 100, strengths=("s1", "s2", "s3"), limitations=("l1",))
    rec = DEFAULT_SCORER.score(strong, TECH_MID)
    assert rec.score >= 70
    assert rec.reasoning[-2:] == ["s1", "s2"]
    assert "l1" not in rec.warnings

    middling = _option("middling", 50, 50, strengths=("s1",), limitations=("l1", "l2"))
    rec = DEFAULT_SCORER.score(middling, TECH_MID)
    assert rec.score == 50
    assert rec.warnings[-1] == "l1"
    assert "l2" not in rec.warnings


def test_region_notes():
    option = _option("a", notes={"region": {"US": "ATS-heavy market"}})
    context = TECH_MID.model_copy(update={"region": "US"})
    assert "ATS-heavy market" in DEFAULT_SCORER.score(option, context).reasoning


def test_bonus_rules_and_clamping():
    def big_bonus(option, context):
        return BonusOutcome(points=200, reasoning="bonus", warning="careful", suggestion="try")

    def no_bonus(option, context):
        return None

    scorer = WeightedScorer(DEFAULT_SCORER.factors, bonus_rules=(big_bonus, no_bonus))
    rec = scorer.score(_option("a", 75, 75), TECH_MID)
    assert rec.score == 100
    assert "bonus" in rec.reasoning
    assert rec.warnings == ["careful"]
    assert rec.suggestions == ["try"]


def test_negative_scores_clamp_to_zero():
    scorer = WeightedScorer(
        [FitFactor(name="industry", context_field="industry", weight=5.0)],
    )
    assert scorer.score(_option("a", industry_fit=0), TECH_MID).score == 0


def test_custom_factor_table():
    scorer = WeightedScorer([FitFactor(name="region", context_field="region", weight=1.0)])
    option = ScoringOption(option_id="eu", name="EU", fit={"region": {"DE": 80}})
    rec = scorer.score(option, RecommendationContext(region="DE"))
    assert rec.score == 80
