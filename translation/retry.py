"""
Retry state machine for translation requests.

One call to RetryMachine.run() moves through

    ATTEMPTING -> SUCCEEDED
    ATTEMPTING -> WAITING -> ATTEMPTING   (retryable failure, budget left)
    ATTEMPTING -> FAILED                  (terminal failure or budget spent)

The machine never touches the network itself: it calls an injected attempt
function returning an AttemptResult, and waits through an injected sleep.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Callable, List, Optional

from models import AttemptOutcome, AttemptResult, RequestAttempt
from .exceptions import RetriesExhausted

logger = logging.getLogger(__name__)

Sleep = Callable[[float], Awaitable[None]]
Report = Callable[[str], None]


class RetryState(Enum):
    ATTEMPTING = "attempting"
    WAITING = "waiting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class RetryPolicy:
    """How many retries to allow and how long to wait before each."""
    max_retries: int = 3
    base_delay: float = 30.0

    def delay_for(self, retry_number: int) -> float:
        """Delay before retry n (n starts at 1): 60s, 120s, 240s with the defaults."""
        return self.base_delay * (2 ** retry_number)

    def next_state(self, result: AttemptResult, attempt: int) -> RetryState:
        """Decide what follows an attempt; attempt 0 is the initial request."""
        if result.outcome is AttemptOutcome.SUCCESS:
            return RetryState.SUCCEEDED
        if result.outcome is AttemptOutcome.TERMINAL:
            return RetryState.FAILED
        if attempt < self.max_retries:
            return RetryState.WAITING
        return RetryState.FAILED


class RetryMachine:
    """Drives a single logical request through the retry states."""

    def __init__(self, policy: RetryPolicy, sleep: Sleep, report: Optional[Report] = None):
        self.policy = policy
        self.sleep = sleep
        self.report = report or (lambda message: None)
        self.history: List[RequestAttempt] = []
        self.state = RetryState.ATTEMPTING

    async def run(self, perform: Callable[[], Awaitable[AttemptResult]]) -> str:
        """
        Run attempts until success, a terminal failure, or the budget runs out.

        Returns:
            The translated text of the successful attempt

        Raises:
            ClientError: on a terminal classification (raised as-is)
            RetriesExhausted: when every retry failed
        """
        attempt = 0
        result = None

        while True:
            if self.state is RetryState.ATTEMPTING:
                result = await perform()
                self.history.append(RequestAttempt(number=attempt, result=result))
                self.state = self.policy.next_state(result, attempt)

            elif self.state is RetryState.WAITING:
                attempt += 1
                delay = self.policy.delay_for(attempt)
                self.report(
                    f"Chunk translation failed ({result.error}). "
                    f"Retrying in {delay:g}s... (Attempt {attempt}/{self.policy.max_retries})"
                )
                await self.sleep(delay)
                self.state = RetryState.ATTEMPTING

            elif self.state is RetryState.SUCCEEDED:
                if attempt:
                    logger.debug("Request succeeded after %d retries (%gs of backoff)", attempt, self.total_delay)
                return result.text

            elif result.outcome is AttemptOutcome.TERMINAL:
                self._report_terminal(result)
                raise result.error

            else:
                logger.debug("Giving up after %d attempts: %s", len(self.history), result.error)
                raise RetriesExhausted(len(self.history), result.error) from result.error

    def _report_terminal(self, result: AttemptResult) -> None:
        self.report(f"Error: {result.error}")
        if result.body is not None:
            self.report(f"-- Server Response Body --\n{result.body}\n-- End of Body --")

    @property
    def total_delay(self) -> float:
        """Seconds waited so far across all retries."""
        return sum(self.policy.delay_for(n) for n in range(1, len(self.history)))
