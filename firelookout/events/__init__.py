from firelookout.events.event_bus import (
	EventBus,
	EVENT_WEATHER_CHANGED,
	EVENT_PLACE_CHANGED,
	EVENT_FIRE_BEHAVIOR_CHANGED,
	EVENT_TIME_CHANGED,
	EVENT_OBJECT_MOVE_FINISHED,
	EVENT_OBJECT_REMOVED
)

__all__ = [
	"EventBus",
	"EVENT_WEATHER_CHANGED",
	"EVENT_PLACE_CHANGED",
	"EVENT_FIRE_BEHAVIOR_CHANGED",
	"EVENT_TIME_CHANGED",
	"EVENT_OBJECT_MOVE_FINISHED",
	"EVENT_OBJECT_REMOVED"
]
