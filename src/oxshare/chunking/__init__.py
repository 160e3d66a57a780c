"""
OxShare Chunking Package

Fixed-size content-addressed chunking, SHA-256 hashing and verified
reassembly.
"""

from .engine import DEFAULT_CHUNK_SIZE, ProcessingEngine, init
from .hasher import ContentHasher, compute_chunk_id

__all__ = [
    "DEFAULT_CHUNK_SIZE",
    "ProcessingEngine",
    "ContentHasher",
    "compute_chunk_id",
    "init",
]
