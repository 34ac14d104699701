"""Fixed-delay spacing for sequential calls against rate-limited APIs."""

from __future__ import annotations

import logging
import time
from typing import Callable, Iterable, Iterator, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

DelayStrategy = Callable[[], None]


class FixedDelay:
    """Sleep for a constant number of seconds each time it is invoked."""

    def __init__(self, seconds: float, sleep: Callable[[float], None] = time.sleep) -> None:
        if seconds < 0:
            raise ValueError("delay seconds must be non-negative")
        self.seconds = seconds
        self._sleep = sleep

    def __call__(self) -> None:
        if self.seconds:
            self._sleep(self.seconds)

    def __repr__(self) -> str:
        return f"FixedDelay({self.seconds!r})"


def no_delay() -> None:
    """Delay strategy for tests and dry runs."""
    return None


class RateLimiter:
    """Space out units of outbound work with a pluggable delay strategy.

    A unit is one logical upstream interaction (a team roster call, or a
    geocode + forecast pair). ``space()`` is called before every unit; the
    first call returns immediately and each later call waits via the delay
    strategy.

    Example:
        limiter = RateLimiter(FixedDelay(1.5))
        for game in games:
            if not needs_lookup(game):
                continue
            limiter.space()
            lookup(game)
    """

    def __init__(self, delay: DelayStrategy = no_delay, *, name: str = "upstream") -> None:
        self._delay = delay
        self.name = name
        self.units = 0

    def space(self) -> None:
        if self.units:
            logger.debug("Waiting before %s call #%d", self.name, self.units + 1)
            self._delay()
        self.units += 1


def iter_rate_limited(items: Iterable[T], limiter: RateLimiter) -> Iterator[T]:
    """Yield ``items`` in order, spacing each one through ``limiter``."""
    for item in items:
        limiter.space()
        yield item
