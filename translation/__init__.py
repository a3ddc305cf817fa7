"""Translation layer - chunking and the LibreTranslate client."""
from .chunker import MIN_CHUNK_SIZE, chunk_text, segment_statistics
from .exceptions import (
    TranslationError,
    RetryableError,
    TransportError,
    ServerFailure,
    ClientError,
    ClientRejection,
    DecodeError,
    RetriesExhausted,
)
from .libretranslate import LibreTranslateClient, classify_response
from .retry import RetryMachine, RetryPolicy, RetryState

__all__ = [
    "MIN_CHUNK_SIZE",
    "chunk_text",
    "segment_statistics",
    "TranslationError",
    "RetryableError",
    "TransportError",
    "ServerFailure",
    "ClientError",
    "ClientRejection",
    "DecodeError",
    "RetriesExhausted",
    "LibreTranslateClient",
    "classify_response",
    "RetryMachine",
    "RetryPolicy",
    "RetryState",
]
