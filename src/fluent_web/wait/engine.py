"""
Retrying condition-wait engine.

A Wait re-evaluates a condition against its subject until it passes or
the deadline expires. The subject is re-resolved on every attempt, so a
node that is detached and re-rendered mid-wait is picked up again.

Retry sleeps are asyncio suspensions: other tasks in the process keep
running, while calls against the same page stay strictly sequential
because each attempt is awaited before the next one starts.
"""

import asyncio
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Generic, TypeVar

from fluent_web.conditions.base import Condition, ConditionResult
from fluent_web.config.settings import Configuration
from fluent_web.core.exceptions import FluentWebError, WaitTimeoutError
from fluent_web.utils.logging import get_logger, get_logger_with_context

logger = get_logger(__name__)

S = TypeVar("S")

FailureHook = Callable[[], Awaitable[dict[str, Any]]]


@dataclass
class WaitOutcome:
    """Loop-local result of one wait."""

    passed: bool
    last_result: ConditionResult
    elapsed_ms: float
    attempts: int


class Wait(Generic[S]):
    """
    Poll-until-success-or-timeout loop over a single subject.

    Created per should/is call; owns nothing beyond the subject, the
    configuration it reads timeout and poll interval from, and the loop
    state of the call in progress.

    Example:
        >>> await Wait(element, config).should_match(be.visible, timeout_ms=2000)
    """

    def __init__(
        self,
        subject: S,
        config: Configuration,
        on_failure: FailureHook | None = None,
    ) -> None:
        """
        Args:
            subject: Element, Collection or Driver under test
            config: Timeout and poll interval source
            on_failure: Coroutine run once before a timeout is raised;
                its returned mapping is attached to the error details
        """
        self.subject = subject
        self.config = config
        self.on_failure = on_failure

    async def should_match(
        self,
        condition: Condition[S],
        timeout_ms: int | None = None,
    ) -> S:
        """
        Wait until the condition holds and return the subject.

        Raises:
            WaitTimeoutError: If the condition did not hold before the deadline
            FluentWebError: Structural errors abort the wait immediately
        """
        outcome = await self._poll(condition, timeout_ms)
        if outcome.passed:
            return self.subject

        details: dict[str, Any] = {"attempts": outcome.attempts}
        if self.on_failure is not None and self.config.save_artifacts_on_failure:
            details.update(await self._run_failure_hook())

        logger.warning(
            f"Timed out after {outcome.elapsed_ms:.0f}ms waiting for "
            f"{self.subject} to match: {condition.name}"
        )
        raise WaitTimeoutError(
            condition=condition.name,
            subject=str(self.subject),
            elapsed_ms=outcome.elapsed_ms,
            last_reason=outcome.last_result.describe(),
            details=details,
        )

    async def is_match(
        self,
        condition: Condition[S],
        timeout_ms: int | None = None,
    ) -> bool:
        """Wait until the condition holds; False instead of raising on timeout."""
        outcome = await self._poll(condition, timeout_ms)
        return outcome.passed

    async def _poll(
        self,
        condition: Condition[S],
        timeout_ms: int | None,
    ) -> WaitOutcome:
        budget_ms = self.config.timeout_ms if timeout_ms is None else timeout_ms
        if budget_ms < 0:
            raise ValueError(f"timeout_ms must not be negative, got {budget_ms}")

        log = get_logger_with_context(__name__, subject=str(self.subject))
        loop = asyncio.get_running_loop()
        started = loop.time()
        deadline = started + budget_ms / 1000
        attempts = 0

        log.debug(f"Waiting up to {budget_ms}ms for: {condition.name}")
        while True:
            attempts += 1
            result = await condition.evaluate(self.subject)
            now = loop.time()
            elapsed_ms = (now - started) * 1000

            if result.passed:
                log.debug(
                    f"Matched {condition.name} after {attempts} attempt(s), "
                    f"{elapsed_ms:.0f}ms"
                )
                return WaitOutcome(True, result, elapsed_ms, attempts)

            if now >= deadline:
                return WaitOutcome(False, result, elapsed_ms, attempts)

            await asyncio.sleep(min(self.config.poll_interval_seconds, deadline - now))

    async def _run_failure_hook(self) -> dict[str, Any]:
        # A broken hook must not hide the timeout itself.
        try:
            return await self.on_failure()
        except (FluentWebError, OSError) as e:
            logger.warning(f"Could not save failure artifacts: {e}")
            return {}
