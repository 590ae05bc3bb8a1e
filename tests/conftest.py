"""Shared fixtures for the Kindred test suite."""

import asyncio

import pytest

from app.core.settings import ScoringSettings
from app.models.candidate import CandidateItem
from app.models.corpus import EvidenceInput
from app.models.profile import (
    Category,
    CategoryTag,
    DimensionScore,
    PersonalityArchetype,
    PersonalityProfile,
)
from app.services.sources.base import ContentSourceAdapter


# ---------------------------------------------------------------------------
# Fake content sources
# ---------------------------------------------------------------------------
class StaticAdapter(ContentSourceAdapter):
    """Returns a fixed list of candidates."""

    def __init__(self, name: str, items: list[CandidateItem]):
        self.name = name
        self.items = items
        self.calls: list[list[Category]] = []

    async def fetch(self, hints: list[Category]) -> list[CandidateItem]:
        self.calls.append(hints)
        return list(self.items)


class FailingAdapter(ContentSourceAdapter):
    def __init__(self, name: str = "failing", error: Exception | None = None):
        self.name = name
        self.error = error or ConnectionError("upstream unavailable")

    async def fetch(self, hints: list[Category]) -> list[CandidateItem]:
        raise self.error


class MalformedAdapter(ContentSourceAdapter):
    """Returns whatever payload it was given, bypassing the candidate model."""

    def __init__(self, name: str = "malformed", payload=None):
        self.name = name
        self.payload = payload

    async def fetch(self, hints: list[Category]):
        return self.payload


class SlowAdapter(ContentSourceAdapter):
    """Never finishes within a test timeout. Records whether it was cancelled."""

    def __init__(self, name: str = "slow", delay: float = 10.0):
        self.name = name
        self.delay = delay
        self.cancelled = False

    async def fetch(self, hints: list[Category]) -> list[CandidateItem]:
        try:
            await asyncio.sleep(self.delay)
        except asyncio.CancelledError:
            self.cancelled = True
            raise
        return []


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------
def make_candidate(url: str, title: str = "Item", source: str = "static", **kwargs) -> CandidateItem:
    return CandidateItem(url=url, title=title, source_name=source, **kwargs)


def make_profile(
    categories: list[Category] | None = None,
    archetype: PersonalityArchetype = PersonalityArchetype.OPTIMIZER,
    conviction: int = 50,
    intuition: int = 50,
    contribution: int = 0,
) -> PersonalityProfile:
    categories = categories or [Category.WELLNESS]
    return PersonalityProfile(
        categories=[CategoryTag(label=c, score=5) for c in categories],
        dimensions=DimensionScore(conviction=conviction, intuition=intuition, contribution=contribution),
        archetype=archetype,
    )


@pytest.fixture
def scoring() -> ScoringSettings:
    return ScoringSettings()


@pytest.fixture
def fast_scoring() -> ScoringSettings:
    """Short per-source timeout so slow sources expire quickly."""
    return ScoringSettings(source_timeout=0.05)


@pytest.fixture
def wellness_evidence() -> EvidenceInput:
    return EvidenceInput(
        messages=[
            "User: I have been doing meditation every morning",
            "User: Yoga classes twice a week",
            "User: Mindfulness helps me stay calm",
            "User: I aim for eight hours of sleep",
        ]
    )


@pytest.fixture
def wellness_items() -> list[CandidateItem]:
    return [
        make_candidate(
            "https://example.com/calm",
            title="Calm Meditation Timer",
            description="Guided meditation and sleep sounds",
            tags=["Wellness"],
            raw_score=70.0,
            popularity=1200,
        ),
        make_candidate(
            "https://example.com/yoga",
            title="Yoga Flow",
            description="Daily yoga routines for fitness",
            tags=["fitness"],
            raw_score=55.0,
            popularity=300,
        ),
        make_candidate(
            "https://example.com/journal",
            title="Mindfulness Journal",
            description="Track mindfulness and wellbeing",
            raw_score=40.0,
        ),
    ]
