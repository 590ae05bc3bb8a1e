import re

from loguru import logger
from pydantic import BaseModel

from app.core.settings import ScoringSettings
from app.models.candidate import CandidateItem, RankedRecommendation
from app.models.profile import Category, PersonalityProfile
from app.services.profile.constants import CATEGORY_KEYWORDS
from app.services.recommendation.constants import (
    ARCHETYPE_HIT_TIERS,
    ARCHETYPE_KEYWORDS,
    ARCHETYPE_TAIL_POINTS,
    BONUS_COMMUNITY,
    BONUS_EARLY_STAGE,
    BONUS_ESTABLISHED,
    BONUS_EXACT_CATEGORY,
    BONUS_NOVEL_CATEGORY,
    CAP_ARCHETYPE,
    CAP_CATEGORY,
    CAP_DIMENSION,
    CAP_SOURCE,
    CATEGORY_MATCH_WEIGHTS,
    COMMUNITY_MARKERS,
    EARLY_STAGE_MARKERS,
    EARLY_STAGE_MAX_POPULARITY,
    ESTABLISHED_MIN_POPULARITY,
    SOURCE_RELEVANCE_FACTOR,
)
from app.shared.text import contains_keyword, matched_keywords, normalize_tag

_EARLY_STAGE = re.compile(r"\b(" + "|".join(EARLY_STAGE_MARKERS) + r")\b", re.IGNORECASE)

BONUS_POINTS: dict[str, int] = {
    "exact_category": BONUS_EXACT_CATEGORY,
    "novel_category": BONUS_NOVEL_CATEGORY,
    "early_stage": BONUS_EARLY_STAGE,
    "established": BONUS_ESTABLISHED,
    "community": BONUS_COMMUNITY,
}

BONUS_REASONS: dict[str, str] = {
    "exact_category": "Right in your focus area",
    "novel_category": "Something new to explore",
    "early_stage": "Early-stage pick for a forward-looking mind",
    "established": "Proven and widely adopted",
    "community": "Community-driven, like you",
}


class ScoreBreakdown(BaseModel):
    category: float = 0.0
    archetype: float = 0.0
    dimension: float = 0.0
    source: float = 0.0

    matched_categories: list[Category] = []
    matched_traits: list[str] = []
    bonuses: list[str] = []

    @property
    def total(self) -> int:
        raw = self.category + self.archetype + self.dimension + self.source
        return int(round(max(0.0, min(raw, 100.0))))


def tiered_points(hits: int) -> int:
    """3 points each for the first 3 hits, 2 for the next 3, 1 for the rest."""
    points = 0
    remaining = hits
    for size, per_hit in ARCHETYPE_HIT_TIERS:
        take = min(remaining, size)
        points += take * per_hit
        remaining -= take
    return points + remaining * ARCHETYPE_TAIL_POINTS


class PersonalizedRanker:
    """
    Scores a candidate against a profile on a 0-100 scale.

    category overlap (<=40) + archetype affinity (<=15) + dimension bonuses (<=15)
    + source relevance (<=30), clamped. The reason names the largest component and
    never feeds back into the score.
    """

    def __init__(self, scoring: ScoringSettings | None = None):
        self.scoring = scoring or ScoringSettings()

    def breakdown(self, candidate: CandidateItem, profile: PersonalityProfile) -> ScoreBreakdown:
        text = candidate.search_text
        result = ScoreBreakdown()

        # Category overlap, diminishing per match
        for category in profile.category_labels:
            keywords = [category.value.lower(), *CATEGORY_KEYWORDS.get(category, [])]
            if any(contains_keyword(text, kw) for kw in keywords):
                result.matched_categories.append(category)
        weights = CATEGORY_MATCH_WEIGHTS
        result.category = min(
            sum(weights[min(i, len(weights) - 1)] for i in range(len(result.matched_categories))),
            CAP_CATEGORY,
        )

        result.matched_traits = matched_keywords(text, ARCHETYPE_KEYWORDS.get(profile.archetype, []))
        result.archetype = min(tiered_points(len(result.matched_traits)), CAP_ARCHETYPE)

        result.bonuses = self._dimension_bonuses(candidate, profile, text)
        result.dimension = min(sum(BONUS_POINTS[b] for b in result.bonuses), CAP_DIMENSION)

        if candidate.raw_score is not None:
            result.source = min(max(candidate.raw_score, 0.0) * SOURCE_RELEVANCE_FACTOR, CAP_SOURCE)

        return result

    def _dimension_bonuses(self, candidate: CandidateItem, profile: PersonalityProfile, text: str) -> list[str]:
        dims = profile.dimensions
        high = self.scoring.high_dimension
        low = self.scoring.low_dimension
        profile_tags = {normalize_tag(c.value) for c in profile.category_labels}
        tags = [normalize_tag(t) for t in candidate.tags if t]
        popularity = candidate.popularity

        bonuses: list[str] = []
        if dims.conviction > high and any(t in profile_tags for t in tags):
            bonuses.append("exact_category")
        if dims.conviction < low and any(t not in profile_tags for t in tags):
            bonuses.append("novel_category")
        if dims.intuition > high and (
            (popularity is not None and popularity < EARLY_STAGE_MAX_POPULARITY) or _EARLY_STAGE.search(text)
        ):
            bonuses.append("early_stage")
        if dims.intuition < low and popularity is not None and popularity > ESTABLISHED_MIN_POPULARITY:
            bonuses.append("established")
        if dims.contribution > self.scoring.contribution_override and any(m in text for m in COMMUNITY_MARKERS):
            bonuses.append("community")
        return bonuses

    def rank(self, candidate: CandidateItem, profile: PersonalityProfile) -> tuple[int, str]:
        result = self.breakdown(candidate, profile)
        return result.total, self.reason(result, profile, candidate)

    @staticmethod
    def reason(result: ScoreBreakdown, profile: PersonalityProfile, candidate: CandidateItem) -> str:
        archetype = profile.archetype.value
        components = {
            "category": result.category,
            "archetype": result.archetype,
            "dimension": result.dimension,
            "source": result.source,
        }
        # max() keeps the first key on ties, so category wins over the rest
        top = max(components, key=lambda k: components[k])
        if components[top] <= 0:
            return f"Fits your {archetype} profile"

        if top == "category" or (top == "source" and result.matched_categories):
            reason = f"Because you're into {result.matched_categories[0].value}"
            if result.matched_traits:
                reason += f", fits your {archetype} style"
            return reason
        if top == "archetype":
            return f"Fits your {archetype} style"
        if top == "dimension":
            return BONUS_REASONS[result.bonuses[0]]
        return f"Highly rated on {candidate.source_name}"

    def rank_all(self, candidates: list[CandidateItem], profile: PersonalityProfile) -> list[RankedRecommendation]:
        ranked: list[RankedRecommendation] = []
        for candidate in candidates:
            score, reason = self.rank(candidate, profile)
            ranked.append(RankedRecommendation(**candidate.model_dump(), match_score=score, reason=reason))
        ranked.sort(key=lambda r: r.match_score, reverse=True)
        if ranked:
            logger.debug(f"Ranked {len(ranked)} candidates, top score {ranked[0].match_score}")
        return ranked

