from abc import ABC, abstractmethod

from app.models.candidate import CandidateItem
from app.models.profile import Category


class ContentSourceAdapter(ABC):
    """
    Interface for one content source.

    `fetch` may raise; the aggregator turns any failure into an empty result for
    this source only. Retries, if any, belong here and not in the pipeline.
    """

    name: str = "source"

    @abstractmethod
    async def fetch(self, hints: list[Category]) -> list[CandidateItem]:
        """
        Return candidates relevant to the profile's categories.
        """
        pass

    async def close(self) -> None:
        """Release network resources. No-op by default."""
        return None
