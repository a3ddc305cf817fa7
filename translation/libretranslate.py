"""LibreTranslate API client with retry and backoff."""
import asyncio
import logging
from typing import Optional

import httpx
from tqdm import tqdm

from config import Config, USER_AGENT
from models import AttemptResult
from .exceptions import ClientRejection, DecodeError, ServerFailure, TransportError
from .retry import Report, RetryMachine, RetryPolicy, Sleep

logger = logging.getLogger(__name__)


def _read_translated_text(response: httpx.Response) -> str:
    """Extract translatedText from a success response or raise DecodeError."""
    try:
        data = response.json()
    except ValueError as e:
        raise DecodeError(str(e), response.text) from e

    if not isinstance(data, dict):
        raise DecodeError(f"expected a JSON object, got {type(data).__name__}", response.text)

    translated = data.get("translatedText")
    if not isinstance(translated, str):
        raise DecodeError("missing string field 'translatedText'", response.text)

    return translated


def classify_response(response: httpx.Response) -> AttemptResult:
    """Map an HTTP response onto success, retryable or terminal."""
    status = response.status_code

    if response.is_success:
        try:
            return AttemptResult.success(_read_translated_text(response), status_code=status)
        except DecodeError as e:
            # Decoding errors mean a contract mismatch, not a transient failure
            return AttemptResult.terminal(e, status_code=status, body=response.text)

    if response.is_client_error:
        return AttemptResult.terminal(
            ClientRejection(status, response.text), status_code=status, body=response.text
        )

    # 5xx server errors or others, worth retrying
    return AttemptResult.retryable(
        ServerFailure(status, response.text), status_code=status, body=response.text
    )


class LibreTranslateClient:
    """Translator using a LibreTranslate-compatible HTTP endpoint."""

    def __init__(
        self,
        config: Config,
        sleep: Sleep = asyncio.sleep,
        report: Optional[Report] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config
        self.sleep = sleep
        self.report = report or tqdm.write
        self.policy = RetryPolicy(max_retries=config.max_retries, base_delay=config.backoff_base)
        self.client = httpx.AsyncClient(
            headers={"User-Agent": USER_AGENT},
            timeout=config.request_timeout,
            follow_redirects=True,
            transport=transport,
        )

    async def perform_attempt(self, text: str, source_lang: str, target_lang: str) -> AttemptResult:
        """Send one translation request and classify what came back."""
        payload = {"q": text, "source": source_lang, "target": target_lang}
        logger.debug("POST %s (%d chars, %s -> %s)", self.config.api_url, len(text), source_lang, target_lang)

        try:
            response = await self.client.post(self.config.api_url, json=payload)
        except httpx.RequestError as e:
            # Cannot reach the endpoint or read the body: retry
            return AttemptResult.retryable(TransportError(f"Request to {self.config.api_url} failed: {e!r}", e))

        return classify_response(response)

    async def translate(
        self,
        text: str,
        source_lang: Optional[str] = None,
        target_lang: Optional[str] = None,
    ) -> str:
        """
        Translate a single chunk.

        Args:
            text: Chunk to translate
            source_lang: Source language code (defaults to config)
            target_lang: Target language code (defaults to config)

        Returns:
            Translated text

        Raises:
            ClientError: the request was rejected or the response was unreadable
            RetriesExhausted: every retry failed
        """
        source_lang = source_lang or self.config.source_lang
        target_lang = target_lang or self.config.target_lang

        machine = RetryMachine(self.policy, self.sleep, self.report)
        return await machine.run(lambda: self.perform_attempt(text, source_lang, target_lang))

    async def close(self):
        """Close the HTTP client."""
        await self.client.aclose()

    async def __aenter__(self) -> "LibreTranslateClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()
