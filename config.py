"""Configuration management for the text translator."""
import os
from dataclasses import dataclass, replace


APP_NAME = "text-translator"
APP_VERSION = "0.1.0"
USER_AGENT = f"{APP_NAME}/{APP_VERSION}"

DEFAULT_API_URL = "https://translate.fedilab.app/translate"

# A bit less than the 5000 byte API limit to be safe
MAX_CHUNK_SIZE = 4500


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be a number, got {raw!r}") from e


@dataclass(frozen=True)
class Config:
    """Configuration loaded from environment variables."""

    # LibreTranslate endpoint
    api_url: str = DEFAULT_API_URL
    source_lang: str = "en"
    target_lang: str = "hu"

    # Chunking (UTF-8 bytes per request)
    max_chunk_size: int = MAX_CHUNK_SIZE

    # Pacing: the public instance allows at most 8 requests per minute
    request_delay: float = 10.0

    # Retry settings: delay before retry n is backoff_base * 2**n seconds
    max_retries: int = 3
    backoff_base: float = 30.0
    request_timeout: float = 300.0  # 5 minute timeout for slow instances

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        return cls(
            api_url=os.getenv("TRANSLATE_API_URL", DEFAULT_API_URL),
            source_lang=os.getenv("TRANSLATE_SOURCE_LANG", "en"),
            target_lang=os.getenv("TRANSLATE_TARGET_LANG", "hu"),
            max_chunk_size=_env_int("TRANSLATE_MAX_CHUNK_SIZE", MAX_CHUNK_SIZE),
            request_delay=_env_float("TRANSLATE_REQUEST_DELAY", 10.0),
            max_retries=_env_int("TRANSLATE_MAX_RETRIES", 3),
            backoff_base=_env_float("TRANSLATE_BACKOFF_BASE", 30.0),
            request_timeout=_env_float("TRANSLATE_REQUEST_TIMEOUT", 300.0),
        )

    def with_overrides(self, **overrides) -> "Config":
        """Return a copy with every non-None override applied."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes)
