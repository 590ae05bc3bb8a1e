"""Tests for frequency-weighted category detection."""

from app.core.settings import ScoringSettings
from app.models.corpus import EvidenceInput, SocialProfile
from app.models.profile import Category
from app.services.profile.categories import CategoryDetector
from app.services.profile.corpus import SignalCorpusBuilder


def corpus_of(*messages: str, social: SocialProfile | None = None):
    return SignalCorpusBuilder().build(EvidenceInput(messages=list(messages), social=social))


class TestCategoryDetector:
    def test_wellness_keywords_yield_single_wellness_tag(self, wellness_evidence):
        corpus = SignalCorpusBuilder().build(wellness_evidence)
        tags = CategoryDetector().detect(corpus)
        assert len(tags) == 1
        assert tags[0].label == Category.WELLNESS
        assert tags[0].score >= 4

    def test_single_mention_does_not_qualify_when_another_does(self):
        corpus = corpus_of(
            "I write python code every day",
            "my python framework needs debugging",
            "I heard about blockchain once",
        )
        labels = [t.label for t in CategoryDetector().detect(corpus)]
        assert labels == [Category.DEVELOPMENT]

    def test_categories_sorted_by_score_and_capped(self):
        corpus = corpus_of(
            "python python python code code",
            "meditation yoga sleep wellness",
            "crypto defi web3 blockchain",
            "marketing seo funnel",
        )
        tags = CategoryDetector().detect(corpus)
        assert len(tags) == 3
        scores = [t.score for t in tags]
        assert scores == sorted(scores, reverse=True)
        assert tags[0].label == Category.DEVELOPMENT

    def test_fallback_returns_exactly_one_tag(self):
        corpus = corpus_of("I tried meditation", "nothing else", "really nothing")
        tags = CategoryDetector().detect(corpus)
        assert len(tags) == 1
        assert tags[0].label == Category.WELLNESS
        assert tags[0].score == 1

    def test_fallback_with_no_keywords_is_first_category(self):
        tags = CategoryDetector().detect(corpus_of("hello", "goodbye", "thanks"))
        assert len(tags) == 1
        assert tags[0].label == Category.AI_TOOLS
        assert tags[0].score == 0

    def test_nothing_below_threshold_unless_fallback(self):
        corpus = corpus_of("yoga yoga yoga", "one mention of seo", "and fitness")
        tags = CategoryDetector().detect(corpus)
        assert all(t.score >= 3 for t in tags)

    def test_social_text_counts_half(self):
        social = SocialProfile(posts=["meditation yoga", "sleep mindfulness"])
        corpus = corpus_of("hi", "hello", "hey", social=social)
        scores = CategoryDetector().score_all(corpus)
        assert scores[Category.WELLNESS] == 2

    def test_threshold_is_configurable(self):
        corpus = corpus_of("I tried meditation", "and yoga", "once")
        strict = CategoryDetector(ScoringSettings(min_category_score=1)).detect(corpus)
        assert strict[0].label == Category.WELLNESS
        assert strict[0].score == 2

    def test_short_keywords_match_whole_words_only(self):
        corpus = corpus_of("she said hello", "maintain the plan", "certain things")
        assert CategoryDetector().score_all(corpus)[Category.AI_TOOLS] == 0
