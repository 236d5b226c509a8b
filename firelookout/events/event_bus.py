"""
Publish/subscribe event bus used per scout and process-wide.
"""
import asyncio
import inspect
from typing import Any, Callable, Dict, List
import logging

logger = logging.getLogger(__name__)

EVENT_WEATHER_CHANGED = "weather-changed"
EVENT_PLACE_CHANGED = "place-changed"
EVENT_FIRE_BEHAVIOR_CHANGED = "fire-behavior-changed"
EVENT_TIME_CHANGED = "application-time-changed"
EVENT_OBJECT_MOVE_FINISHED = "move-finished"
EVENT_OBJECT_REMOVED = "removed"

Handler = Callable[[Any], Any]


class EventBus:
	"""
	Synchronous publish/subscribe on the running event loop.

	Handlers run to completion in subscription order before fire() returns.
	A handler that raises is logged and the remaining handlers still run.
	A handler that returns a coroutine has it scheduled as a task on the running loop;
	fire() returns those tasks so callers can await the work they started.
	"""

	def __init__(self, name: str = "events"):
		self.name = name
		self._handlers: Dict[str, List[Handler]] = {}

	def on(self, event_name: str, handler: Handler) -> None:
		"""Subscribe a handler to an event."""
		self._handlers.setdefault(event_name, []).append(handler)

	def off(self, event_name: str, handler: Handler) -> None:
		"""Unsubscribe a handler; unknown handlers are ignored."""
		handlers = self._handlers.get(event_name, [])
		if handler in handlers:
			handlers.remove(handler)

	def has_handlers(self, event_name: str) -> bool:
		return bool(self._handlers.get(event_name))

	def fire(self, event_name: str, payload: Any = None) -> List[asyncio.Task]:
		"""
		Publish an event to every subscribed handler.

		Args:
			event_name: Event name (one of the EVENT_* constants)
			payload: Value passed to each handler

		Returns:
			Tasks scheduled for handlers that returned coroutines
		"""
		tasks = []
		# Copy: handlers may unsubscribe while the event is being delivered
		for handler in list(self._handlers.get(event_name, [])):
			try:
				result = handler(payload)
			except Exception as e:
				logger.exception(f"{self.name}: {event_name} handler failed: {str(e)}")
				continue
			if inspect.isawaitable(result):
				tasks.append(asyncio.ensure_future(result))
		logger.debug(f"{self.name}: {event_name} delivered to {len(self._handlers.get(event_name, []))} handlers")
		return tasks
