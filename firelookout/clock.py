"""
Process-wide application clock.
"""
from datetime import datetime, timedelta, timezone
from typing import List, Optional
import asyncio
from firelookout.events import EventBus, EVENT_TIME_CHANGED
from firelookout.utils.datetime_utils import ensure_utc
import logging

logger = logging.getLogger(__name__)


class ApplicationClock:
	"""
	The time the application is showing, which may differ from wall clock time.
	Every change is announced as an application-time-changed event carrying the new time.
	"""

	def __init__(self, events: EventBus, time: Optional[datetime] = None):
		self.events = events
		self._time = ensure_utc(time) if time else datetime.now(timezone.utc)

	@property
	def time(self) -> datetime:
		return self._time

	def set_time(self, time: datetime) -> List[asyncio.Task]:
		"""
		Change the application time.

		Returns:
			Tasks started by the subscribers
		"""
		self._time = ensure_utc(time)
		logger.info(f"Application time changed: {self._time.isoformat()}")
		return self.events.fire(EVENT_TIME_CHANGED, self._time)

	def advance(self, minutes: float) -> List[asyncio.Task]:
		"""Move the application time forward (or back, when negative)."""
		return self.set_time(self._time + timedelta(minutes=minutes))
