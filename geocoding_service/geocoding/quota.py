"""Daily quota flag shared by every geocoder using the same cache namespace."""
import math
import time
import logging

# Get logger
logger = logging.getLogger(__name__)

DAILY_LIMIT_KEY = "dailyLimit"
DAILY_LIMIT_WINDOW = 3600 * 24  # Blackout after the provider reports OVER_QUERY_LIMIT


class QuotaGuard:
    def __init__(self, cache, clock=time.time):
        self.cache = cache
        self.clock = clock

    def is_over_limit(self):
        flag = self.cache.load(DAILY_LIMIT_KEY)
        if not flag:
            return False
        try:
            marked_at = float(flag)
        except (TypeError, ValueError):
            marked_at = None
        if marked_at is None or not math.isfinite(marked_at):
            logger.warning(f"Ignoring unreadable quota flag: {flag!r}")
            return False
        return (self.clock() - marked_at) <= DAILY_LIMIT_WINDOW

    def mark_limit(self):
        self.cache.save(str(int(self.clock())), DAILY_LIMIT_KEY)
        logger.error("Geocoding daily limit reached. Requests are suspended for 24 hours")
