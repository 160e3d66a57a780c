"""
OxShare core: content-addressed chunking and verified reconstruction.
"""

from .chunking import DEFAULT_CHUNK_SIZE, ContentHasher, ProcessingEngine, init
from .core.errors import (
    EmptyInput,
    EngineError,
    IntegrityFailure,
    InvalidSequence,
    SerializationError,
)
from .core.models import Chunk, ChunkId, ProcessingResult

__version__ = "0.1.0"

# Library version for compatibility checks
VERSION = __version__

__all__ = [
    "__version__",
    "VERSION",
    "DEFAULT_CHUNK_SIZE",
    "init",
    "ProcessingEngine",
    "ContentHasher",
    "Chunk",
    "ChunkId",
    "ProcessingResult",
    "EngineError",
    "EmptyInput",
    "IntegrityFailure",
    "InvalidSequence",
    "SerializationError",
]
