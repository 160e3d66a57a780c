"""Content-addressed chunk records shared by the engine and the artifact layer."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, RootModel


class ChunkId(RootModel[str]):
    """Lowercase hex SHA-256 digest (64 chars) identifying a piece of content.

    Compares equal to another ChunkId or to the identical plain string.
    """

    model_config = ConfigDict(frozen=True)

    root: str = Field(..., pattern=r"^[0-9a-f]{64}$")

    def as_str(self) -> str:
        return self.root

    def short(self) -> str:
        """First 8 and last 8 characters, for log lines and tables only."""
        return f"{self.root[:8]}...{self.root[-8:]}"

    def __str__(self) -> str:
        return self.root

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, ChunkId):
            return self.root == other.root
        if isinstance(other, str):
            return self.root == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.root)


class Chunk(BaseModel):
    """A contiguous slice of an original byte stream."""

    model_config = ConfigDict(
        frozen=True, ser_json_bytes="base64", val_json_bytes="base64"
    )

    id: ChunkId
    data: bytes
    offset: int = Field(..., ge=0)  # position of data[0] in the original stream

    def size(self) -> int:
        return len(self.data)


class ProcessingResult(BaseModel):
    """Ordered chunks plus the digest of the whole original input."""

    model_config = ConfigDict(
        frozen=True, ser_json_bytes="base64", val_json_bytes="base64"
    )

    chunks: tuple[Chunk, ...]
    total_size: int = Field(..., ge=0)
    root_hash: ChunkId

    @property
    def chunk_count(self) -> int:
        return len(self.chunks)

    @property
    def dedup_ratio(self) -> Optional[float]:
        """
        Fraction of the original size saved by storing only unique chunks.

        Chunks are never merged, so stored size always equals total_size and
        this returns None for anything produced by ProcessingEngine.process.
        """
        unique_size = sum(chunk.size() for chunk in self.chunks)
        if unique_size < self.total_size:
            return 1.0 - (unique_size / self.total_size)
        return None
