"""Rate limit tracking and 429 backoff for Auth0 API requests.

Auth0 reports its limits on every response through ``x-ratelimit-limit``,
``x-ratelimit-remaining`` and ``x-ratelimit-reset`` (a unix timestamp).
When a request is answered with 429 the client waits until the advertised
reset if that is near, and falls back to exponential backoff with jitter
otherwise. Optional throttling slows callers down as headroom shrinks.
"""

import random
import time
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

# Headroom tiers (remaining / limit)
HIGH_HEADROOM_THRESHOLD = 0.70
LOW_HEADROOM_THRESHOLD = 0.20
CRITICAL_HEADROOM_THRESHOLD = 0.10

# Throttle sleeps in seconds
MIN_SLEEP_TIME = 0.1
DEFAULT_SLEEP_TIME = 0.5
CAUTIOUS_SLEEP_TIME = 1.0

# 429 backoff in seconds
INITIAL_BACKOFF = 0.1
BACKOFF_MULTIPLIER = 2.0
MAX_BACKOFF_TIME = 10.0
JITTER_FACTOR = 0.25
RESET_BUFFER = 0.5

LIMIT_HEADER = "x-ratelimit-limit"
REMAINING_HEADER = "x-ratelimit-remaining"
RESET_HEADER = "x-ratelimit-reset"


def _parse_int(value: Any) -> int | None:
    try:
        return int(value)
    except (ValueError, TypeError):
        return None


@dataclass(frozen=True)
class RateLimit:
    """Rate limit values reported on one response; ``None`` when absent."""

    limit: int | None = None
    remaining: int | None = None
    reset: int | None = None

    @classmethod
    def from_headers(cls, headers: Mapping[str, Any] | None) -> "RateLimit":
        """Parse the ``x-ratelimit-*`` headers (any casing); bad values are ignored."""
        lowered = {str(key).lower(): value for key, value in (headers or {}).items()}
        return cls(
            limit=_parse_int(lowered.get(LIMIT_HEADER)),
            remaining=_parse_int(lowered.get(REMAINING_HEADER)),
            reset=_parse_int(lowered.get(RESET_HEADER)),
        )

    @property
    def reset_at(self) -> datetime | None:
        if self.reset is None:
            return None
        return datetime.fromtimestamp(self.reset, tz=UTC)

    @property
    def headroom_ratio(self) -> float | None:
        """Fraction of the window still available, if Auth0 reported it."""
        if not self.limit or self.remaining is None:
            return None
        return self.remaining / self.limit

    @property
    def is_known(self) -> bool:
        return any(v is not None for v in (self.limit, self.remaining, self.reset))

    def seconds_until_reset(self, now: float | None = None) -> float | None:
        """Seconds until the window resets (negative once it has passed)."""
        if self.reset is None:
            return None
        return self.reset - (time.time() if now is None else now)


@dataclass
class RateLimitState:
    """Consecutive 429 count and the next exponential backoff step."""

    consecutive_429s: int = 0
    _current_backoff: float = field(default=INITIAL_BACKOFF, repr=False)

    def reset_backoff(self) -> None:
        self.consecutive_429s = 0
        self._current_backoff = INITIAL_BACKOFF

    def increment_backoff(self) -> float:
        """Count a 429 and return the current step plus up to 25% jitter."""
        self.consecutive_429s += 1
        step = min(self._current_backoff, MAX_BACKOFF_TIME)
        self._current_backoff = min(step * BACKOFF_MULTIPLIER, MAX_BACKOFF_TIME)
        # Jitter keeps concurrent clients from retrying in lockstep
        return step + random.uniform(0, step * JITTER_FACTOR)


def _headroom_tier(headroom: float | None) -> str:
    if headroom is None:
        return "unknown"
    if headroom < CRITICAL_HEADROOM_THRESHOLD:
        return "critical"
    if headroom < LOW_HEADROOM_THRESHOLD:
        return "low"
    if headroom <= HIGH_HEADROOM_THRESHOLD:
        return "normal"
    return "high"


class AdaptiveRateLimiter:
    """Computes retry and throttle delays from Auth0 rate limit headers.

    One limiter is shared by every request a client sends, so a run of 429
    responses grows the backoff across endpoints until a request succeeds.
    """

    def __init__(
        self,
        min_sleep: float = MIN_SLEEP_TIME,
        default_sleep: float = DEFAULT_SLEEP_TIME,
        cautious_sleep: float = CAUTIOUS_SLEEP_TIME,
    ):
        """Initialize the rate limiter.

        Args:
            min_sleep: Throttle sleep while more than 70% of the window is left
            default_sleep: Throttle sleep for normal or unknown headroom
            cautious_sleep: Throttle sleep below 20% headroom
        """
        self.min_sleep = min_sleep
        self.default_sleep = default_sleep
        self.cautious_sleep = cautious_sleep
        self.state = RateLimitState()

    def backoff_delay(self, rate_limit: RateLimit | None = None) -> float:
        """Seconds to wait before retrying a 429 response.

        A reset less than MAX_BACKOFF_TIME away is waited out (plus a small
        buffer); otherwise the exponential backoff step is used.
        """
        backoff = self.state.increment_backoff()

        wait = rate_limit.seconds_until_reset() if rate_limit else None
        if wait is not None and 0 < wait <= MAX_BACKOFF_TIME:
            return wait + RESET_BUFFER
        return backoff

    def record_success(self) -> None:
        """Forget earlier 429s after a non-429 response."""
        self.state.reset_backoff()

    def throttle_delay(self, rate_limit: RateLimit | None) -> float:
        """Seconds to pause after a response when throttling is enabled."""
        tier = _headroom_tier(rate_limit.headroom_ratio if rate_limit else None)
        if tier == "critical":
            return self._wait_for_reset(rate_limit)
        if tier == "low":
            return self.cautious_sleep
        if tier == "high":
            return self.min_sleep
        return self.default_sleep

    def _wait_for_reset(self, rate_limit: RateLimit | None) -> float:
        wait = rate_limit.seconds_until_reset() if rate_limit else None
        if wait is None or wait <= 0:
            return self.cautious_sleep
        return wait + RESET_BUFFER

    def get_status_summary(self, rate_limit: RateLimit | None) -> str:
        """One line describing the remaining headroom, for logs and the CLI."""
        headroom = rate_limit.headroom_ratio if rate_limit else None
        tier = _headroom_tier(headroom)
        if rate_limit is None or headroom is None:
            return "Rate limit status: unknown"

        usage = f"{rate_limit.remaining}/{rate_limit.limit} ({headroom:.0%})"
        if tier == "critical":
            return f"Rate limit CRITICAL: {usage} - waiting for reset"
        if tier == "low":
            return f"Rate limit LOW: {usage} - slowing down"
        return f"Rate limit OK: {usage}"
