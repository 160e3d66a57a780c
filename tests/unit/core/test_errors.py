"""Tests for the engine error taxonomy."""

import pytest

import oxshare
from oxshare.chunking.engine import ProcessingEngine
from oxshare.chunking.hasher import compute_chunk_id
from oxshare.core.artifacts import dump_chunks_ndjson, load_chunks_ndjson
from oxshare.core.errors import (
    EmptyInput,
    EngineError,
    IntegrityFailure,
    InvalidSequence,
    SerializationError,
)


@pytest.mark.parametrize(
    "error_cls", [EmptyInput, IntegrityFailure, InvalidSequence, SerializationError]
)
def test_all_kinds_are_engine_errors(error_cls):
    assert issubclass(error_cls, EngineError)


def test_package_root_exports_error_kinds():
    assert oxshare.InvalidSequence is InvalidSequence
    assert oxshare.IntegrityFailure is IntegrityFailure
    assert oxshare.EmptyInput is EmptyInput
    assert oxshare.SerializationError is SerializationError
    assert oxshare.EngineError is EngineError


def test_empty_input_message():
    assert str(EmptyInput()) == "input data cannot be empty"


def test_invalid_sequence_offset_and_message():
    error = oxshare.InvalidSequence(7)

    assert error.offset == 7
    assert str(error) == "invalid chunk sequence: missing chunk at offset 7"


def test_integrity_failure_message_and_attributes():
    expected = compute_chunk_id(b"expected")
    actual = compute_chunk_id(b"actual")

    error = IntegrityFailure(expected=expected, actual=actual)

    assert error.expected == expected
    assert error.actual == actual
    assert str(error) == (
        "chunk integrity verification failed: "
        f"expected {expected.as_str()}, got {actual.as_str()}"
    )


def test_reconstruct_with_gap_does_not_raise_invalid_sequence():
    """Missing chunks are not detected; the remaining data is concatenated."""
    engine = ProcessingEngine(4)
    chunks = list(engine.process(b"aaaabbbbcccc").chunks)

    out = engine.reconstruct([chunks[0], chunks[2]])

    assert out == b"aaaacccc"


def test_serialization_error_chains_cause_on_ndjson_path():
    result = ProcessingEngine(4).process(b"aaaabbbb")
    text = dump_chunks_ndjson(result.chunks) + '{"id": "nope", "data": "", "offset": 0}\n'

    with pytest.raises(SerializationError) as exc_info:
        load_chunks_ndjson(text)

    assert exc_info.value.__cause__ is not None
    assert "line 3" in str(exc_info.value)


def test_serialization_error_chains_cause_on_bad_utf8():
    with pytest.raises(SerializationError) as exc_info:
        load_chunks_ndjson(b"\xff\xfe{not utf8")

    assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)
