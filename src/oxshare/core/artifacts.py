"""JSON / NDJSON encoding of processing results for storage and transport.

Chunk payloads are base64 in JSON so bytes round-trip exactly. Decoding does
not re-check hashes; ProcessingEngine.reconstruct does that.
"""

from pathlib import Path
from typing import Iterable, List

from pydantic import ValidationError

from .errors import SerializationError
from .models import Chunk, ProcessingResult


def dump_result(result: ProcessingResult) -> str:
    return result.model_dump_json(indent=2)


def load_result(text: str | bytes) -> ProcessingResult:
    """
    Decode a result written by dump_result.

    Raises:
        SerializationError: If the text is not valid JSON or does not match the schema
    """
    try:
        return ProcessingResult.model_validate_json(text)
    except ValidationError as e:
        raise SerializationError(f"invalid processing result: {e}") from e


def dump_chunks_ndjson(chunks: Iterable[Chunk]) -> str:
    """One JSON object per line, in the given order."""
    return "".join(chunk.model_dump_json() + "\n" for chunk in chunks)


def load_chunks_ndjson(text: str | bytes) -> List[Chunk]:
    """
    Decode a chunk stream written by dump_chunks_ndjson.

    Raises:
        SerializationError: If the stream is not UTF-8 or a line does not match the schema
    """
    if isinstance(text, bytes):
        try:
            text = text.decode("utf-8")
        except UnicodeDecodeError as e:
            raise SerializationError(f"chunk stream is not valid UTF-8: {e}") from e

    chunks = []
    for line_num, line in enumerate(text.splitlines(), 1):
        if not line.strip():
            continue
        try:
            chunks.append(Chunk.model_validate_json(line))
        except ValidationError as e:
            raise SerializationError(
                f"invalid chunk record on line {line_num}: {e}"
            ) from e
    return chunks


def write_result(result: ProcessingResult, path: str | Path) -> Path:
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(dump_result(result), encoding="utf-8")
    return out


def read_result(path: str | Path) -> ProcessingResult:
    return load_result(Path(path).read_bytes())


def read_chunks_ndjson(path: str | Path) -> List[Chunk]:
    return load_chunks_ndjson(Path(path).read_bytes())
