# adoc/crawler/backoff.py
"""
Retry policy: exponential backoff bounded by a wall-clock budget.

The policy does no I/O and keeps no state, so the fetcher asks it for the
next delay after every failed attempt.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from adoc.config import CrawlerConfig


@dataclass(frozen=True, slots=True)
class ExponentialBackoff:
    """Exponential backoff with jitter and an elapsed-time ceiling."""

    initial_interval: float = 0.5
    multiplier: float = 1.5
    max_interval: float = 60.0
    max_elapsed_time: float = 30.0
    randomization_factor: float = 0.5
    max_retries: Optional[int] = None

    @classmethod
    def from_config(cls, config: CrawlerConfig) -> ExponentialBackoff:
        return cls(
            initial_interval=config.initial_interval,
            multiplier=config.multiplier,
            max_interval=config.max_interval,
            max_elapsed_time=config.timeout,
            randomization_factor=config.randomization_factor,
            max_retries=config.max_retries,
        )

    def interval(self, attempt: int) -> float:
        """Un-jittered delay after the *attempt*-th failure (1-based)."""
        return min(self.initial_interval * self.multiplier ** (attempt - 1), self.max_interval)

    def next_delay(self, attempt: int, elapsed: float, rand: float = 0.5) -> Optional[float]:
        """
        Delay before the next attempt, or None to give up.

        *attempt* is the number of attempts made so far, *elapsed* the seconds
        since the first one started and *rand* a sample from [0, 1) for the
        jitter (0.5 means no jitter).
        """
        if self.max_retries is not None and attempt > self.max_retries:
            return None
        base = self.interval(attempt)
        delta = self.randomization_factor * base
        delay = base - delta + 2 * delta * rand
        if elapsed + delay > self.max_elapsed_time:
            return None
        return delay
