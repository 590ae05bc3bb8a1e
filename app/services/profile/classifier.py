from app.models.profile import DimensionScore, PersonalityArchetype
from app.services.profile.constants import DIMENSION_MIDPOINT


class PersonalityClassifier:
    """
    Maps dimension scores to an archetype.

    Contribution above the override threshold wins outright (Cultivator). Otherwise a
    2x2 quadrant on (conviction, intuition) around the midpoint:

        conviction >= 50, intuition >= 50 -> Visionary
        conviction <  50, intuition >= 50 -> Explorer
        conviction >= 50, intuition <  50 -> Optimizer
        conviction <  50, intuition <  50 -> Innovator
    """

    def __init__(self, contribution_override: int = 55, midpoint: int = DIMENSION_MIDPOINT):
        self.contribution_override = contribution_override
        self.midpoint = midpoint

    def classify(self, dimensions: DimensionScore) -> PersonalityArchetype:
        if dimensions.contribution > self.contribution_override:
            return PersonalityArchetype.CULTIVATOR

        focused = dimensions.conviction >= self.midpoint
        visionary = dimensions.intuition >= self.midpoint
        if focused and visionary:
            return PersonalityArchetype.VISIONARY
        if visionary:
            return PersonalityArchetype.EXPLORER
        if focused:
            return PersonalityArchetype.OPTIMIZER
        return PersonalityArchetype.INNOVATOR
