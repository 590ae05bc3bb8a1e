"""Tests for personalized ranking."""

import itertools

import pytest
from conftest import make_candidate, make_profile

from app.models.profile import Category, PersonalityArchetype
from app.services.recommendation.ranking import PersonalizedRanker, tiered_points


@pytest.fixture
def ranker(scoring) -> PersonalizedRanker:
    return PersonalizedRanker(scoring)


class TestTieredPoints:
    @pytest.mark.parametrize("hits,expected", [(0, 0), (1, 3), (3, 9), (5, 13), (6, 15), (7, 16)])
    def test_diminishing_returns(self, hits, expected):
        assert tiered_points(hits) == expected


class TestCategoryOverlap:
    def test_diminishing_weights(self, ranker):
        profile = make_profile([Category.WELLNESS, Category.EDUCATION, Category.FINANCE])
        one = make_candidate("https://a.dev", title="Meditation app")
        two = make_candidate("https://b.dev", title="Meditation course")
        three = make_candidate("https://c.dev", title="Meditation course budget")
        assert ranker.breakdown(one, profile).category == 20
        assert ranker.breakdown(two, profile).category == 32
        assert ranker.breakdown(three, profile).category == 40

    def test_tags_count_toward_overlap(self, ranker):
        profile = make_profile([Category.WELLNESS])
        item = make_candidate("https://a.dev", title="Thing", tags=["wellness"])
        assert ranker.breakdown(item, profile).matched_categories == [Category.WELLNESS]

    def test_category_reason(self, ranker):
        profile = make_profile([Category.WELLNESS, Category.EDUCATION])
        score, reason = ranker.rank(make_candidate("https://a.dev", title="Meditation course"), profile)
        assert score == 32
        assert reason == "Because you're into Wellness"


class TestArchetypeAffinity:
    def test_capped_at_fifteen(self, ranker):
        profile = make_profile([Category.WELLNESS], archetype=PersonalityArchetype.OPTIMIZER)
        item = make_candidate(
            "https://a.dev",
            title="Bench",
            description="efficiency analytics performance metrics benchmark optimize refine",
        )
        result = ranker.breakdown(item, profile)
        assert len(result.matched_traits) == 7
        assert result.archetype == 15
        assert ranker.rank(item, profile) == (15, "Fits your Optimizer style")

    def test_combined_reason(self, ranker):
        profile = make_profile([Category.WELLNESS], archetype=PersonalityArchetype.OPTIMIZER)
        item = make_candidate("https://a.dev", title="Meditation benchmark")
        score, reason = ranker.rank(item, profile)
        assert score == 23
        assert reason == "Because you're into Wellness, fits your Optimizer style"


class TestDimensionBonuses:
    def test_high_conviction_rewards_exact_category(self, ranker):
        item = make_candidate("https://a.dev", title="Thing", tags=["Wellness"])
        assert ranker.rank(item, make_profile(conviction=80))[0] == 28
        assert ranker.rank(item, make_profile(conviction=50))[0] == 20

    def test_low_conviction_rewards_novel_category(self, ranker):
        item = make_candidate("https://a.dev", title="x", tags=["gardening"])
        score, reason = ranker.rank(item, make_profile(conviction=20))
        assert score == 5
        assert reason == "Something new to explore"

    def test_high_intuition_rewards_early_stage(self, ranker):
        profile = make_profile(intuition=80)
        assert ranker.breakdown(make_candidate("https://a.dev", title="x", popularity=100), profile).bonuses == [
            "early_stage"
        ]
        assert ranker.breakdown(make_candidate("https://a.dev", title="x beta"), profile).bonuses == ["early_stage"]
        assert ranker.breakdown(make_candidate("https://a.dev", title="x", popularity=9000), profile).bonuses == []

    def test_low_intuition_rewards_established(self, ranker):
        profile = make_profile(intuition=20)
        assert ranker.breakdown(make_candidate("https://a.dev", title="x", popularity=10000), profile).dimension == 6
        assert ranker.breakdown(make_candidate("https://a.dev", title="x", popularity=100), profile).dimension == 0

    def test_high_contribution_rewards_community(self, ranker):
        item = make_candidate("https://a.dev", title="x", description="community plugin")
        assert ranker.breakdown(item, make_profile(contribution=70)).dimension == 6
        assert ranker.breakdown(item, make_profile(contribution=55)).dimension == 0

    def test_bonuses_are_capped(self, ranker):
        profile = make_profile(conviction=80, intuition=80, contribution=70)
        item = make_candidate("https://a.dev", title="x", description="community", tags=["Wellness"], popularity=10)
        result = ranker.breakdown(item, profile)
        assert len(result.bonuses) == 3
        assert result.dimension == 15


class TestSourceRelevance:
    def test_scaled_and_capped(self, ranker):
        profile = make_profile()
        assert ranker.breakdown(make_candidate("https://a.dev", title="x", raw_score=50.0), profile).source == pytest.approx(15)
        assert ranker.breakdown(make_candidate("https://a.dev", title="x", raw_score=100.0), profile).source == pytest.approx(30)

    def test_source_reason(self, ranker):
        item = make_candidate("https://a.dev", title="zzz", source="github", raw_score=80.0)
        assert ranker.rank(item, make_profile()) == (24, "Highly rated on github")


class TestBounds:
    def test_score_always_within_range(self, ranker):
        candidates = [
            make_candidate("https://a.dev", title=""),
            make_candidate("https://a.dev", title="x", tags=[], popularity=0),
            make_candidate("https://a.dev", title="x", raw_score=-50.0),
            make_candidate(
                "https://a.dev",
                title="Meditation course budget crypto python seo",
                description="community beta efficiency analytics performance metrics benchmark optimize",
                tags=["Wellness", "Education", "Finance", "other"],
                popularity=0,
                raw_score=100.0,
            ),
        ]
        profiles = [
            make_profile(
                [Category.WELLNESS, Category.EDUCATION, Category.FINANCE],
                archetype=archetype,
                conviction=conviction,
                intuition=intuition,
                contribution=contribution,
            )
            for archetype in PersonalityArchetype
            for conviction, intuition, contribution in itertools.product((0, 50, 100), repeat=3)
        ]
        for candidate, profile in itertools.product(candidates, profiles):
            score, reason = ranker.rank(candidate, profile)
            assert 0 <= score <= 100
            assert reason

    def test_empty_candidate_scores_zero(self, ranker):
        profile = make_profile(archetype=PersonalityArchetype.VISIONARY)
        assert ranker.rank(make_candidate("https://a.dev", title="zzz"), profile) == (0, "Fits your Visionary profile")


class TestRankAll:
    def test_sorted_by_score(self, ranker, wellness_items):
        ranked = ranker.rank_all(wellness_items, make_profile())
        scores = [r.match_score for r in ranked]
        assert scores == sorted(scores, reverse=True)
        assert all(r.reason for r in ranked)
        assert {r.canonical_id for r in ranked} == {item.canonical_id for item in wellness_items}
