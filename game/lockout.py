from __future__ import annotations
import logging
import math
from typing import List, Optional

logger = logging.getLogger(__name__)

UNIT_PENALTY = 60.0


class LockoutClock:
    """
    Tracks wrong guesses and when the next submission is allowed.

    Each failure locks submissions for ``len(failures) * unit_penalty``
    seconds, measured from that failure. The count is cumulative over the
    whole session; a correct guess does not reset it.
    """

    def __init__(self, unit_penalty: float = UNIT_PENALTY) -> None:
        if unit_penalty < 0:
            raise ValueError("unit_penalty must be non-negative.")
        self.unit_penalty = float(unit_penalty)
        self.failures: List[float] = []
        self.allow_after: Optional[float] = None

    def record_failure(self, now: float) -> float:
        self.failures.append(now)
        self.allow_after = now + len(self.failures) * self.unit_penalty
        logger.debug(
            "Failure #%d at %.3f, locked until %.3f",
            len(self.failures), now, self.allow_after,
        )
        return self.allow_after

    def is_locked(self, now: float) -> bool:
        return self.allow_after is not None and now < self.allow_after

    def remaining_minutes(self, now: float) -> int:
        if self.allow_after is None:
            return 0
        return max(0, math.ceil((self.allow_after - now) / 60.0))
