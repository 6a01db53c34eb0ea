from typing import List, Optional


class SkelforgeError(Exception):
    """Base class for skelforge errors."""


class SpecGenerationError(SkelforgeError):
    """A whole specification could not be generated. `__cause__` holds the inner error."""


class SpecSerializationError(SkelforgeError):
    pass


class SpecFormatError(SpecSerializationError):
    """Input is not valid JSON (or not a JSON object)."""


class SpecValidationError(SpecSerializationError):
    """Input parsed, but the specification it describes is invalid."""

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.errors = list(errors or [])


class CacheImportError(SkelforgeError):
    pass


class ContextClosedError(SkelforgeError):
    pass
