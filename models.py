"""Data models for the translation pipeline."""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


@dataclass(frozen=True)
class Document:
    """Input text read once from disk; never mutated afterwards."""
    source_path: str
    text: str                                       # Line endings normalized to "\n"
    segments: List[str] = field(default_factory=list)  # Ordered chunks produced by the chunker

    @property
    def is_empty(self) -> bool:
        return not self.segments


class AttemptOutcome(Enum):
    """Classification of a single request attempt."""
    SUCCESS = "success"
    RETRYABLE = "retryable"
    TERMINAL = "terminal"


@dataclass
class AttemptResult:
    """Result of one network call, as seen by the retry machine."""
    outcome: AttemptOutcome
    text: Optional[str] = None          # Translated text when outcome is SUCCESS
    error: Optional[Exception] = None   # TranslationError otherwise
    status_code: Optional[int] = None   # None for transport failures
    body: Optional[str] = None

    @classmethod
    def success(cls, text: str, status_code: int = 200) -> "AttemptResult":
        return cls(AttemptOutcome.SUCCESS, text=text, status_code=status_code)

    @classmethod
    def retryable(cls, error: Exception, status_code: Optional[int] = None,
                  body: Optional[str] = None) -> "AttemptResult":
        return cls(AttemptOutcome.RETRYABLE, error=error, status_code=status_code, body=body)

    @classmethod
    def terminal(cls, error: Exception, status_code: Optional[int] = None,
                 body: Optional[str] = None) -> "AttemptResult":
        return cls(AttemptOutcome.TERMINAL, error=error, status_code=status_code, body=body)


@dataclass
class RequestAttempt:
    """Ephemeral record of one attempt; 0 is the initial attempt."""
    number: int
    result: AttemptResult


@dataclass
class TranslationRun:
    """Summary of one pipeline run."""
    source_path: str
    chunks_total: int
    chunks_done: int = 0
    output_path: Optional[str] = None   # None when printed to the console or nothing to translate
    translated_text: str = ""
    duration_seconds: float = 0.0
