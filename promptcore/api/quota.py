"""Daily token quotas per caller and model tier."""

from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Callable, Optional

from promptcore.api.catalog import is_premium_model
from promptcore.utils.config import get_settings
from promptcore.utils.logger import get_logger

logger = get_logger()

ANONYMOUS_USER = "anon"


class QuotaExceededError(Exception):
    """Raised when a request would exceed the caller's daily quota."""

    def __init__(self, message: str, limit: int, remaining: int):
        super().__init__(message)
        self.limit = limit
        self.remaining = remaining


@dataclass
class QuotaResult:
    """Outcome of a quota check."""

    allowed: bool
    remaining: int
    limit: int

    def to_dict(self) -> dict:
        return {"allowed": self.allowed, "remaining": self.remaining, "limit": self.limit}


@dataclass
class QuotaConfig:
    """Daily token limits per tier."""

    free_daily_tokens: int = 2_500_000
    premium_daily_tokens: int = 250_000


def _utc_today() -> date:
    return datetime.now(timezone.utc).date()


class TokenQuota:
    """In-memory daily token counters keyed by (day, user, tier)."""

    def __init__(
        self,
        config: Optional[QuotaConfig] = None,
        clock: Callable[[], date] = _utc_today,
    ):
        """Initialize the quota.

        Args:
            config: Daily limits per tier.
            clock: Returns the current day; counters reset when it changes.
        """
        self.config = config or QuotaConfig()
        self.clock = clock
        self.counters: dict[tuple[date, str, str], int] = {}
        self._last_day: Optional[date] = None

    def _bucket(self, model: str) -> tuple[str, int]:
        if is_premium_model(model):
            return "premium", self.config.premium_daily_tokens
        return "free", self.config.free_daily_tokens

    def _key(self, user_id: Optional[str], bucket: str) -> tuple[date, str, str]:
        return (self.clock(), user_id or ANONYMOUS_USER, bucket)

    def usage(self, user_id: Optional[str], model: str) -> int:
        """Tokens the caller has used today in the model's tier."""
        bucket, _ = self._bucket(model)
        return self.counters.get(self._key(user_id, bucket), 0)

    def check_and_consume(
        self,
        user_id: Optional[str],
        model: str,
        tokens: int,
        raise_on_limit: bool = False,
    ) -> QuotaResult:
        """Charge tokens against the caller's quota.

        The charge is applied first and reverted if it pushes usage over the
        limit. Counters from earlier days are dropped on the first charge of
        a new day.

        Args:
            user_id: Caller id, or None for anonymous callers.
            model: Model the tokens are spent on; selects the tier.
            tokens: Tokens to charge.
            raise_on_limit: Whether to raise instead of returning a denial.

        Returns:
            QuotaResult; remaining is computed from the charged total.

        Raises:
            QuotaExceededError: If denied and raise_on_limit is True.
        """
        today = self.clock()
        if today != self._last_day:
            self.cleanup_expired()
            self._last_day = today

        bucket, limit = self._bucket(model)
        key = self._key(user_id, bucket)

        used = self.counters.get(key, 0) + tokens
        self.counters[key] = used
        remaining = max(0, limit - used)

        if used > limit:
            self.counters[key] = used - tokens
            logger.warning(
                f"Quota exceeded for {key[1]} ({bucket}): {used - tokens}+{tokens} > {limit}"
            )
            if raise_on_limit:
                raise QuotaExceededError(
                    f"Daily {bucket} token quota of {limit} exceeded",
                    limit=limit,
                    remaining=remaining,
                )
            return QuotaResult(allowed=False, remaining=remaining, limit=limit)

        return QuotaResult(allowed=True, remaining=remaining, limit=limit)

    def refund(self, user_id: Optional[str], model: str, tokens: int) -> None:
        """Return tokens charged for a request that produced nothing."""
        bucket, _ = self._bucket(model)
        key = self._key(user_id, bucket)
        if key in self.counters:
            self.counters[key] = max(0, self.counters[key] - tokens)

    def cleanup_expired(self) -> int:
        """Drop counters from previous days.

        Returns:
            Number of counters removed.
        """
        today = self.clock()
        expired = [key for key in self.counters if key[0] != today]
        for key in expired:
            del self.counters[key]
        if expired:
            logger.debug(f"Cleaned up {len(expired)} expired quota counters")
        return len(expired)


# Global quota instance
_quota: Optional[TokenQuota] = None


def get_quota() -> TokenQuota:
    """Get the global token quota."""
    global _quota
    if _quota is None:
        settings = get_settings()
        _quota = TokenQuota(
            QuotaConfig(
                free_daily_tokens=settings.free_daily_tokens,
                premium_daily_tokens=settings.premium_daily_tokens,
            )
        )
    return _quota
