import asyncio
from collections.abc import Sequence

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from app.core.exceptions import SourceFetchError
from app.models.candidate import CandidateItem
from app.models.profile import Category
from app.services.sources.base import ContentSourceAdapter


class SourceResult(BaseModel):
    """Outcome of one source for one request. A failed source carries no items."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    source: str
    items: list[CandidateItem] = Field(default_factory=list)
    error: SourceFetchError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class AggregationResult(BaseModel):
    results: list[SourceResult] = Field(default_factory=list)

    @property
    def items(self) -> list[CandidateItem]:
        """All candidates, in source registration order."""
        return [item for result in self.results for item in result.items]

    @property
    def failed_sources(self) -> list[str]:
        return [result.source for result in self.results if not result.ok]


class CandidateAggregator:
    """
    Queries every source concurrently, each under its own timeout.

    Waits for all sources to settle. A source that fails or times out yields an
    empty slot; it never aborts its siblings or the request.

    Cancelling the caller cancels every in-flight fetch and re-raises
    ``CancelledError``. Slots that had already settled are discarded with the
    request; a cancelled request has no consumer left to rank them for.
    """

    def __init__(self, timeout: float = 8.0):
        self.timeout = timeout

    async def fetch(self, adapters: Sequence[ContentSourceAdapter], hints: list[Category]) -> AggregationResult:
        if not adapters:
            logger.warning("No content sources registered")
            return AggregationResult()

        tasks = [self._fetch_one(adapter, hints) for adapter in adapters]
        results = await asyncio.gather(*tasks)

        result = AggregationResult(results=list(results))
        logger.info(
            f"Aggregated {len(result.items)} candidates from {len(adapters)} sources"
            + (f" (failed: {', '.join(result.failed_sources)})" if result.failed_sources else "")
        )
        return result

    async def _fetch_one(self, adapter: ContentSourceAdapter, hints: list[Category]) -> SourceResult:
        name = adapter.name
        try:
            items = await asyncio.wait_for(adapter.fetch(hints), timeout=self.timeout)
            # A payload that is not a list of candidates fails here and is treated like any other error
            result = SourceResult(source=name, items=list(items))
        except asyncio.TimeoutError as e:
            error = SourceFetchError(name, e)
            logger.warning(f"Source '{name}' timed out after {self.timeout}s")
            return SourceResult(source=name, error=error)
        except SourceFetchError as e:
            logger.warning(str(e))
            return SourceResult(source=name, error=e)
        except Exception as e:
            error = SourceFetchError(name, e)
            logger.warning(str(error))
            return SourceResult(source=name, error=error)

        logger.debug(f"Source '{name}' returned {len(result.items)} candidates")
        return result
