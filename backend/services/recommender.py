"""Generic weighted-factor scorer for ranking recommendation options.

Template recommendations and role guidance both configure a
``WeightedScorer`` with their own factor weights, option fit tables, and
bonus rules; the scoring algorithm itself lives only here.
"""

import logging
from collections.abc import Callable, Sequence

from pydantic import BaseModel, ConfigDict

from models.schemas.recommendation import (
    Recommendation,
    RecommendationContext,
    ScoringOption,
)

logger = logging.getLogger(__name__)

BASE_SCORE = 50
HIGH_FIT = 85
LOW_FIT = 65
STRENGTHS_THRESHOLD = 70
LIMITATIONS_THRESHOLD = 50
MAX_STRENGTHS = 2
MAX_LIMITATIONS = 1


class FitFactor(BaseModel):
    """A weighted lookup of ``option.fit[name][context value]``.

    Messages are format strings receiving ``value``. A low fit is filed
    under ``low_bucket`` ("warnings" or "suggestions").
    """
    model_config = ConfigDict(frozen=True)

    name: str
    context_field: str
    weight: float
    high_message: str = ""
    low_message: str = ""
    low_bucket: str = "warnings"


class BonusOutcome(BaseModel):
    model_config = ConfigDict(frozen=True)

    points: float = 0
    reasoning: str | None = None
    warning: str | None = None
    suggestion: str | None = None


BonusRule = Callable[[ScoringOption, RecommendationContext], BonusOutcome | None]


def _context_value(context: RecommendationContext, field: str) -> str | None:
    value = getattr(context, field, None)
    return value or None


class WeightedScorer:
    """Scores options against a context: base 50, weighted fits, flat bonuses."""

    def __init__(
        self,
        factors: Sequence[FitFactor],
        bonus_rules: Sequence[BonusRule] = (),
        note_fields: Sequence[str] = (),
    ):
        self.factors = tuple(factors)
        self.bonus_rules = tuple(bonus_rules)
        self.note_fields = tuple(note_fields)

    def score(
        self, option: ScoringOption, context: RecommendationContext
    ) -> Recommendation:
        score: float = BASE_SCORE
        reasoning: list[str] = []
        warnings: list[str] = []
        suggestions: list[str] = []

        for factor in self.factors:
            value = _context_value(context, factor.context_field)
            if value is None:
                continue
            fit = option.fit.get(factor.name, {}).get(value)
            if fit is None:
                continue
            score += (fit - 50) * factor.weight
            if fit >= HIGH_FIT and factor.high_message:
                reasoning.append(factor.high_message.format(value=value))
            elif fit <= LOW_FIT and factor.low_message:
                bucket = suggestions if factor.low_bucket == "suggestions" else warnings
                bucket.append(factor.low_message.format(value=value))

        for field in self.note_fields:
            value = _context_value(context, field)
            note = option.notes.get(field, {}).get(value) if value else None
            if note:
                reasoning.append(note)

        for rule in self.bonus_rules:
            outcome = rule(option, context)
            if outcome is None:
                continue
            score += outcome.points
            if outcome.reasoning:
                reasoning.append(outcome.reasoning)
            if outcome.warning:
                warnings.append(outcome.warning)
            if outcome.suggestion:
                suggestions.append(outcome.suggestion)

        score = max(0.0, min(100.0, score))
        if score >= STRENGTHS_THRESHOLD:
            reasoning.extend(option.strengths[:MAX_STRENGTHS])
        elif score >= LIMITATIONS_THRESHOLD:
            warnings.extend(option.limitations[:MAX_LIMITATIONS])

        return Recommendation(
            option_id=option.option_id,
            name=option.name,
            score=round(score),
            reasoning=reasoning,
            warnings=warnings,
            suggestions=suggestions,
        )

    def rank(
        self, options: Sequence[ScoringOption], context: RecommendationContext
    ) -> list[Recommendation]:
        """Score every option, best first; equal scores keep input order."""
        scored = [self.score(option, context) for option in options]
        ranked = sorted(scored, key=lambda rec: rec.score, reverse=True)
        if ranked:
            logger.debug(
                "Ranked %d options, top=%s (%d)",
                len(ranked), ranked[0].option_id, ranked[0].score,
            )
        return ranked


def rank_options(
    options: Sequence[ScoringOption],
    context: RecommendationContext,
    scorer: WeightedScorer | None = None,
) -> list[Recommendation]:
    """Rank options with ``scorer``, or with plain industry/level weighting."""
    return (scorer or DEFAULT_SCORER).rank(options, context)


DEFAULT_SCORER = WeightedScorer(
    factors=(
        FitFactor(
            name="industry", context_field="industry", weight=0.30,
            high_message="Well-suited for {value} industry",
            low_message="May not be ideal for {value} roles",
        ),
        FitFactor(
            name="level", context_field="experience_level", weight=0.25,
            high_message="Optimized for {value}-level candidates",
            low_message="Consider alternatives for {value}-level positions",
            low_bucket="suggestions",
        ),
    ),
    note_fields=("region",),
)
