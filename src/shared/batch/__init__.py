"""Shared batch processing infrastructure.

Provides generic utilities for sequential fetch loops:
- FetchProgress: Per-item outcome logging and end-of-run summary
- RateLimiter: Fixed spacing between upstream calls with a pluggable delay
- iter_rate_limited: Iterator wrapper that spaces each item through a RateLimiter

Usage:
    from src.shared.batch import FetchProgress, FixedDelay, RateLimiter, iter_rate_limited
"""

from .progress import FetchProgress
from .rate_limit import DelayStrategy, FixedDelay, RateLimiter, iter_rate_limited, no_delay

__all__ = [
    "DelayStrategy",
    "FetchProgress",
    "FixedDelay",
    "RateLimiter",
    "iter_rate_limited",
    "no_delay",
]
