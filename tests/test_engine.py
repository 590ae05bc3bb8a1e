"""Scenario tests for the full recommendation pipeline."""

import pytest
from conftest import FailingAdapter, MalformedAdapter, SlowAdapter, StaticAdapter, make_candidate, make_profile

from app.models.profile import Category
from app.services.recommendation.engine import RecommendationEngine


@pytest.fixture
def engine(fast_scoring) -> RecommendationEngine:
    return RecommendationEngine(fast_scoring)


class TestRecommendationEngine:
    @pytest.mark.asyncio
    async def test_ranked_and_grouped(self, engine, wellness_items):
        profile = make_profile([Category.WELLNESS])
        result = await engine.recommend(profile, [StaticAdapter("static", wellness_items)])

        assert len(result) == 3
        assert all(r.category_group == Category.WELLNESS for r in result)
        scores = [r.match_score for r in result]
        assert scores == sorted(scores, reverse=True)
        assert all(0 <= s <= 100 for s in scores)

    @pytest.mark.asyncio
    async def test_survives_a_timed_out_source(self, engine, wellness_items):
        profile = make_profile([Category.WELLNESS])
        result = await engine.recommend(profile, [SlowAdapter("slow"), StaticAdapter("fast", wellness_items)])

        assert {r.source_name for r in result} == {"static"}
        assert {r.canonical_id for r in result} == {item.canonical_id for item in wellness_items}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("payload", [None, [{"url": "https://broken.dev"}]])
    async def test_survives_a_malformed_source(self, engine, wellness_items, payload):
        profile = make_profile([Category.WELLNESS])
        adapters = [MalformedAdapter("bad", payload), StaticAdapter("fast", wellness_items)]
        result = await engine.recommend(profile, adapters)

        assert {r.canonical_id for r in result} == {item.canonical_id for item in wellness_items}

    @pytest.mark.asyncio
    async def test_duplicates_across_sources_keep_higher_score(self, engine):
        profile = make_profile([Category.WELLNESS])
        curated = StaticAdapter("curated", [make_candidate("https://x.dev/app", source="curated", raw_score=40.0)])
        github = StaticAdapter("github", [make_candidate("https://X.dev/app/", source="github", raw_score=65.0)])
        result = await engine.recommend(profile, [curated, github])

        assert len(result) == 1
        assert result[0].source_name == "github"
        assert result[0].raw_score == 65.0

    @pytest.mark.asyncio
    async def test_all_sources_failing_returns_empty(self, engine):
        result = await engine.recommend(make_profile(), [FailingAdapter(), SlowAdapter()])
        assert result == []

    @pytest.mark.asyncio
    async def test_candidates_without_identity_are_skipped(self, engine):
        items = [make_candidate("", title="orphan"), make_candidate("https://a.dev", title="yoga")]
        result = await engine.recommend(make_profile(), [StaticAdapter("static", items)])
        assert [r.canonical_id for r in result] == ["https://a.dev"]

    @pytest.mark.asyncio
    async def test_buckets_follow_profile_categories(self, engine):
        items = [
            make_candidate(f"https://dev.example/{i}", title=f"python tool {i}", raw_score=80.0) for i in range(10)
        ] + [make_candidate(f"https://calm.example/{i}", title=f"yoga tool {i}", raw_score=80.0) for i in range(2)]
        profile = make_profile([Category.WELLNESS, Category.DEVELOPMENT])
        result = await engine.recommend(profile, [StaticAdapter("static", items)])

        groups = [r.category_group for r in result]
        assert groups == [Category.WELLNESS] * 2 + [Category.DEVELOPMENT] * 7
