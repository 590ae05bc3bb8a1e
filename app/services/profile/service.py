import random

from loguru import logger

from app.core.settings import ScoringSettings, get_default_scoring_settings
from app.models.corpus import EvidenceInput, SignalCorpus, SignalSource
from app.models.profile import CategoryTag, DimensionScore, PersonalityArchetype, PersonalityProfile
from app.services.profile.categories import CategoryDetector
from app.services.profile.classifier import PersonalityClassifier
from app.services.profile.constants import (
    DESCRIPTIONS,
    FALLBACK_CATEGORY_NAME,
    INTEREST_LABELS,
    MAX_INTERESTS,
    TAGLINE_TEMPLATES,
)
from app.services.profile.corpus import SignalCorpusBuilder
from app.services.profile.dimensions import DimensionScorer
from app.shared.text import contains_keyword


class ProfileService:
    """
    Builds a PersonalityProfile from raw evidence.

    corpus -> {categories, dimensions} -> archetype, plus the presentation extras
    (tagline, description, interests, confidence).
    """

    def __init__(self, scoring: ScoringSettings | None = None, rng: random.Random | None = None):
        self.scoring = scoring or get_default_scoring_settings()
        self.corpus_builder = SignalCorpusBuilder(self.scoring)
        self.category_detector = CategoryDetector(self.scoring)
        self.dimension_scorer = DimensionScorer()
        self.classifier = PersonalityClassifier(contribution_override=self.scoring.contribution_override)
        self._rng = rng or random.Random()

    def build_profile(self, evidence: EvidenceInput) -> PersonalityProfile:
        """
        Raises:
            InsufficientSignalError: evidence holds fewer than `min_messages` messages.
        """
        corpus = self.corpus_builder.build(evidence)
        return self.profile_from_corpus(corpus)

    def profile_from_corpus(self, corpus: SignalCorpus) -> PersonalityProfile:
        categories = self.category_detector.detect(corpus)
        dimensions = self.dimension_scorer.score(corpus)
        archetype = self.classifier.classify(dimensions)

        logger.info(
            f"Profiled {archetype.display_name}: conviction={dimensions.conviction}, "
            f"intuition={dimensions.intuition}, contribution={dimensions.contribution}, "
            f"categories={[t.label.value for t in categories]}"
        )
        logger.debug(summarize_dimensions(dimensions))

        return PersonalityProfile(
            categories=categories,
            dimensions=dimensions,
            archetype=archetype,
            tagline=self.tagline(archetype, categories),
            description=self.description(archetype, categories),
            interests=self.interests(corpus),
            confidence=self.confidence(corpus),
            data_quality=self.data_quality(corpus, self.dimension_scorer),
        )

    @staticmethod
    def tagline(archetype: PersonalityArchetype, categories: list[CategoryTag]) -> str:
        top = categories[0].label.value if categories else FALLBACK_CATEGORY_NAME
        return TAGLINE_TEMPLATES[archetype].format(category=top)

    def description(self, archetype: PersonalityArchetype, categories: list[CategoryTag]) -> str:
        labels = [t.label.value for t in categories] or [FALLBACK_CATEGORY_NAME]
        template = self._rng.choice(DESCRIPTIONS[archetype])
        return template.format(primary=labels[0], all=", ".join(labels))

    @staticmethod
    def interests(corpus: SignalCorpus) -> list[str]:
        text = corpus.full_text
        return [label for label in INTEREST_LABELS if contains_keyword(text, label)][:MAX_INTERESTS]

    @staticmethod
    def confidence(corpus: SignalCorpus) -> int:
        """How much evidence backs the profile, 30-100."""
        confidence = 30
        if corpus.post_count > 10:
            confidence += 20
        if corpus.structured and len(corpus.structured.records) > 20:
            confidence += 25
        if corpus.message_count > 5:
            confidence += 10
        return min(confidence, 100)

    @staticmethod
    def data_quality(corpus: SignalCorpus, scorer: DimensionScorer) -> int:
        """
        Conversation carries most of the weight (up to 85), social profile is a
        supplemental public signal (up to 15).
        """
        score = 0
        if corpus.has_source(SignalSource.CONVERSATION):
            score += 70
            text = corpus.full_text
            if len(scorer.topic_mentions(text)) >= 3:
                score += 5
            if len(ProfileService.interests(corpus)) >= 3:
                score += 5
            if corpus.message_count >= 5:
                score += 5

        if corpus.has_source(SignalSource.SOCIAL_PROFILE):
            score += 10
            if corpus.post_count >= 10:
                score += 3
            if corpus.following_count >= 20:
                score += 2

        return min(score, 100)


def summarize_dimensions(dimensions: DimensionScore) -> str:
    return (
        f"Conviction {dimensions.conviction} ({dimensions.rationale.conviction}) | "
        f"Intuition {dimensions.intuition} ({dimensions.rationale.intuition}) | "
        f"Contribution {dimensions.contribution} ({dimensions.rationale.contribution})"
    )
