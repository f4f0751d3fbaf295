"""Exception hierarchy for the question engine."""


class OlympiadError(Exception):
    """Base class for engine errors."""
    pass


class StoreError(OlympiadError):
    """Raised when a history or curated store cannot serve a request."""
    pass


class StoreTimeoutError(StoreError):
    """Raised when a store call exceeds its time budget."""
    pass
