"""
Celebration effect triggering with debounce.
"""
import logging
import threading
import time
from typing import Optional

from .types import EffectSinkProto

logger = logging.getLogger(__name__)


class MockEffects:
    """Mock effect sink that logs effects instead of drawing them."""

    def __init__(self):
        """Initialize the mock sink."""
        self.celebrate_count = 0
        self.last_origin: Optional[tuple] = None

    async def celebrate(self, x: float, y: float, message: str) -> None:
        """Log the effect instead of rendering it."""
        self.celebrate_count += 1
        self.last_origin = (x, y)
        logger.info(f"[MockEffects] {message} at ({x:.3f}, {y:.3f}) (call #{self.celebrate_count})")

    def reset_counters(self) -> None:
        """Reset effect counters for testing."""
        self.celebrate_count = 0
        self.last_origin = None


class EffectTrigger:
    """
    Fires an effect sink at most once per cooldown window.

    Owns the last-trigger timestamp. The lock keeps the check-and-set
    atomic when frames are handled from more than one thread.
    """

    def __init__(self, sink: EffectSinkProto, cooldown_ms: int = 1000):
        """Initialize the trigger with a sink and a cooldown."""
        self.sink = sink
        self.cooldown_ms = cooldown_ms
        self._last_fired: Optional[float] = None
        self._lock = threading.Lock()

    def _claim(self, t_now: float) -> bool:
        with self._lock:
            if self._last_fired is not None and (t_now - self._last_fired) * 1000 < self.cooldown_ms:
                return False
            self._last_fired = t_now
            return True

    async def fire(self, x: float, y: float, message: str, t_now: Optional[float] = None) -> bool:
        """
        Trigger the effect unless still cooling down.

        Args:
            x: Normalized x of the effect origin
            y: Normalized y of the effect origin
            message: Label passed to the sink
            t_now: Current timestamp in seconds, defaults to time.monotonic()

        Returns:
            True if the sink was called
        """
        if t_now is None:
            t_now = time.monotonic()

        if not self._claim(t_now):
            logger.debug(f"Effect '{message}' suppressed by {self.cooldown_ms}ms cooldown")
            return False

        await self.sink.celebrate(x, y, message)
        return True

    def reset(self) -> None:
        """Forget the last trigger time."""
        with self._lock:
            self._last_fired = None
