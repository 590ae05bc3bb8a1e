from loguru import logger

from app.core.exceptions import MalformedCandidateError
from app.models.candidate import CandidateItem


def _beats(challenger: CandidateItem, incumbent: CandidateItem) -> bool:
    """Strictly higher raw_score wins; a scored item beats an unscored one. Ties keep the incumbent."""
    if challenger.raw_score is None:
        return False
    if incumbent.raw_score is None:
        return True
    return challenger.raw_score > incumbent.raw_score


class Deduplicator:
    """
    Collapses candidates that share a canonical identity.

    Input order is source registration order, so on a tie the earlier source wins.
    The output keeps first-seen order of each identity.
    """

    def dedupe(self, items: list[CandidateItem]) -> list[CandidateItem]:
        kept: dict[str, CandidateItem] = {}
        dropped: list[MalformedCandidateError] = []

        for item in items:
            key = item.canonical_id
            if not key:
                dropped.append(MalformedCandidateError(item.source_name, item.title))
                continue
            current = kept.get(key)
            if current is None or _beats(item, current):
                # Replacing keeps the dict slot, so position stays first-seen
                kept[key] = item

        if dropped:
            logger.warning(f"Dropped {len(dropped)} candidates without a canonical identity")
            for error in dropped:
                logger.debug(str(error))

        collapsed = len(items) - len(dropped) - len(kept)
        if collapsed:
            logger.debug(f"Collapsed {collapsed} duplicate candidates")
        return list(kept.values())
