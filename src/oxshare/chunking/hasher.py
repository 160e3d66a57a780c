"""SHA-256 content addressing."""

import hashlib

from ..core.models import ChunkId

BytesLike = bytes | bytearray | memoryview


def compute_chunk_id(data: BytesLike) -> ChunkId:
    """
    Compute the content address of a byte sequence.

    Args:
        data: Bytes to hash, may be empty

    Returns:
        ChunkId holding the lowercase hex SHA-256 digest (64 chars)
    """
    return ChunkId(hashlib.sha256(data).hexdigest())


class ContentHasher:
    """Stateless SHA-256 hasher; instances are interchangeable."""

    def compute(self, data: BytesLike) -> ChunkId:
        return compute_chunk_id(data)

    def verify(self, data: BytesLike, expected: ChunkId | str) -> bool:
        """True if data hashes to expected."""
        return self.compute(data) == expected
