"""
Fixed-size chunking engine with integrity-checked reconstruction.
"""

from __future__ import annotations

from typing import Iterable

from ..core.errors import EmptyInput, IntegrityFailure
from ..core.models import Chunk, ProcessingResult
from .hasher import BytesLike, ContentHasher

# 256 KiB
DEFAULT_CHUNK_SIZE = 262_144


class ProcessingEngine:
    """
    Splits byte streams into content-addressed chunks and reassembles them.

    Boundaries are purely positional: every chunk is chunk_size bytes except
    possibly the last. Inserting bytes near the start of a stream therefore
    shifts every later boundary.

    The engine holds only its read-only chunk size, so one instance can be
    shared across threads.
    """

    def __init__(self, chunk_size: int = DEFAULT_CHUNK_SIZE):
        if isinstance(chunk_size, bool) or not isinstance(chunk_size, int):
            raise ValueError(f"chunk_size must be an integer, got {chunk_size!r}")
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        self._chunk_size = chunk_size
        self._hasher = ContentHasher()

    @property
    def chunk_size(self) -> int:
        return self._chunk_size

    def __repr__(self) -> str:
        return f"ProcessingEngine(chunk_size={self._chunk_size})"

    def process(self, data: BytesLike) -> ProcessingResult:
        """
        Split data into chunks and hash each chunk and the whole input.

        Args:
            data: Raw bytes to process

        Returns:
            ProcessingResult with chunks at offsets 0, chunk_size, 2*chunk_size, ...

        Raises:
            EmptyInput: If data is empty
        """
        view = memoryview(data).cast("B")
        total_size = view.nbytes
        if total_size == 0:
            raise EmptyInput()

        chunks = []
        offset = 0
        while offset < total_size:
            end = min(offset + self._chunk_size, total_size)
            segment = bytes(view[offset:end])
            chunks.append(
                Chunk(
                    id=self._hasher.compute(segment),
                    data=segment,
                    offset=offset,
                )
            )
            offset = end

        # Root hash is a separate pass over the full input, not a combination
        # of the chunk ids.
        return ProcessingResult(
            chunks=tuple(chunks),
            total_size=total_size,
            root_hash=self._hasher.compute(view),
        )

    def reconstruct(self, chunks: Iterable[Chunk]) -> bytes:
        """
        Verify each chunk against its id and concatenate them in the given order.

        Offsets are not consulted: ordering, gaps and duplicates are the
        caller's responsibility.

        Args:
            chunks: Chunks in the order their data should appear

        Returns:
            The concatenated chunk data

        Raises:
            EmptyInput: If no chunks are given
            IntegrityFailure: On the first chunk whose data does not match its id
        """
        chunks = list(chunks)
        if not chunks:
            raise EmptyInput()

        buffer = bytearray(sum(chunk.size() for chunk in chunks))
        position = 0
        for chunk in chunks:
            actual = self._hasher.compute(chunk.data)
            if actual != chunk.id:
                raise IntegrityFailure(expected=chunk.id, actual=actual)
            end = position + chunk.size()
            buffer[position:end] = chunk.data
            position = end

        return bytes(buffer)


def init() -> ProcessingEngine:
    """Engine configured with DEFAULT_CHUNK_SIZE."""
    return ProcessingEngine(DEFAULT_CHUNK_SIZE)
