"""
Profile System - deterministic, keyword- and signal-weighted.

Evidence becomes a SignalCorpus, which is scored into categories and three
behavioral dimensions, then classified into an archetype. Every step is a pure
function of its input so it can be audited and tested in isolation.
"""

from app.services.profile.categories import CategoryDetector
from app.services.profile.classifier import PersonalityClassifier
from app.services.profile.corpus import SignalCorpusBuilder
from app.services.profile.dimensions import DimensionScorer
from app.services.profile.service import ProfileService

__all__ = [
    "SignalCorpusBuilder",
    "CategoryDetector",
    "DimensionScorer",
    "PersonalityClassifier",
    "ProfileService",
]
