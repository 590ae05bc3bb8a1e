class KindredError(Exception):
    """Base class for profile and recommendation errors."""


class InsufficientSignalError(KindredError):
    """Raised when the evidence holds too few messages to form a profile."""

    def __init__(self, observed: int, required: int):
        self.observed = observed
        self.required = required
        super().__init__(
            f"Insufficient conversation data: {observed} messages found (minimum {required} required)"
        )


class SourceFetchError(KindredError):
    """A single content source failed. Never propagated past the aggregator."""

    def __init__(self, source: str, cause: BaseException | None = None):
        self.source = source
        self.cause = cause
        detail = f"{type(cause).__name__}: {cause}" if cause else "unknown error"
        super().__init__(f"Source '{source}' failed: {detail}")


class MalformedCandidateError(KindredError):
    """A candidate without a canonical identity."""

    def __init__(self, source: str, title: str | None = None):
        self.source = source
        self.title = title
        super().__init__(f"Candidate from '{source}' has no canonical identity ({title or 'untitled'})")
