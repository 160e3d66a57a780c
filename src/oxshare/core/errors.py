"""Errors raised by the processing engine and the artifact layer."""

from .models import ChunkId


class EngineError(Exception):
    """Base class for all oxshare failures."""

    pass


class EmptyInput(EngineError):
    """Raised when process or reconstruct receives nothing to work on."""

    def __init__(self) -> None:
        super().__init__("input data cannot be empty")


class IntegrityFailure(EngineError):
    """Raised when content does not hash to the identifier stored with it."""

    def __init__(self, expected: ChunkId, actual: ChunkId) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"chunk integrity verification failed: expected {expected}, got {actual}"
        )


class InvalidSequence(EngineError):
    """Missing chunk at a given offset.

    Not raised by ProcessingEngine.reconstruct, which trusts caller ordering.
    """

    def __init__(self, offset: int) -> None:
        self.offset = offset
        super().__init__(
            f"invalid chunk sequence: missing chunk at offset {offset}"
        )


class SerializationError(EngineError):
    """Raised when a stored result or chunk stream cannot be decoded."""

    pass
