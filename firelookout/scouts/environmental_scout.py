"""
Weather scout: a movable point that keeps a weather forecast and place name current.
"""
import asyncio
import uuid
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional
from firelookout.capabilities import Movable, Removable
from firelookout.config import settings
from firelookout.context import LookoutContext
from firelookout.events import (
	EventBus,
	EVENT_WEATHER_CHANGED,
	EVENT_PLACE_CHANGED,
	EVENT_OBJECT_MOVE_FINISHED,
	EVENT_OBJECT_REMOVED
)
from firelookout.exceptions import ProviderError, ValidationError
from firelookout.schemas.scout import ScoutParameters
from firelookout.schemas.weather import WeatherSample
from firelookout.utils.place_parser import PlaceParser
from firelookout.weather.forecast_series import ForecastSeries, sample_at, get_all_forecasts
import logging

logger = logging.getLogger(__name__)


class EnvironmentalScout:
	"""
	A point on the map with its own weather forecast and place name.

	The forecast and place are refreshed from the context's weather and place providers.
	Every successful refresh replaces the previous value wholesale and is announced on
	this scout's event bus (weather-changed, place-changed). Moving the scout refreshes both.
	"""

	DEFAULT_NAME = "Wx Scout"

	def __init__(
		self,
		context: LookoutContext,
		latitude: float,
		longitude: float,
		id: Optional[str] = None,
		name: Optional[str] = None,
		is_movable: bool = True,
		duration_hours: Optional[int] = None,
		owner: Optional[Any] = None,
		on_remove: Optional[Callable[[], Any]] = None
	):
		self._validate_position(latitude, longitude)
		self.context = context
		self._id = id or uuid.uuid4().hex
		self.name = name or self.DEFAULT_NAME
		self._latitude = latitude
		self._longitude = longitude
		self.duration_hours = duration_hours or settings.default_forecast_duration_hours

		# Entity reported in this scout's events: a containing lookout, or the scout itself
		self.owner = owner if owner is not None else self
		self.events = EventBus(f"scout:{self._id}")

		self.forecast_series: Optional[ForecastSeries] = None
		self.place_name: Optional[str] = None
		self.places: List[Dict[str, str]] = []

		self.movable = Movable(self._apply_move, enabled=is_movable)
		self.removable = Removable(on_remove)

		# Refresh once a move is finished, never during the move itself
		self.events.on(EVENT_OBJECT_MOVE_FINISHED, self._on_move_finished)

	@property
	def id(self) -> str:
		return self._id

	@property
	def latitude(self) -> float:
		return self._latitude

	@property
	def longitude(self) -> float:
		return self._longitude

	@property
	def is_movable(self) -> bool:
		return self.movable.enabled

	@is_movable.setter
	def is_movable(self, value: bool):
		self.movable.enabled = bool(value)

	@property
	def location(self) -> str:
		"""Display string of the position."""
		return f"Lat {self._latitude:.4g}\nLon {self._longitude:.5g}"

	@staticmethod
	def _validate_position(latitude: float, longitude: float):
		if not -90.0 <= latitude <= 90.0 or not -180.0 <= longitude <= 180.0:
			raise ValidationError(f"Invalid position: latitude {latitude}, longitude {longitude}")

	# Forecast access

	def get_first_forecast(self) -> WeatherSample:
		"""Returns the earliest forecast sample."""
		return self.get_forecast_at_time(None)

	def get_forecast_at_time(self, time: Optional[datetime]) -> WeatherSample:
		"""
		Returns the forecast sample nearest the given time.

		Args:
			time: Time used to select the sample; None selects the first sample

		Returns:
			Forecast sample, or INVALID_WEATHER when no forecast has been fetched
		"""
		return sample_at(self.forecast_series, time)

	def get_forecasts(self) -> List[WeatherSample]:
		"""Returns all forecast samples."""
		return get_all_forecasts(self.forecast_series)

	# Refresh

	async def refresh(self) -> None:
		"""Updates the forecast and the place name concurrently."""
		await asyncio.gather(self.refresh_forecast(), self.refresh_place())

	async def refresh_forecast(self) -> bool:
		"""
		Fetches the point forecast and replaces the forecast series.
		Fires weather-changed on success. On failure the previous series is kept.

		Returns:
			True if the forecast was replaced
		"""
		try:
			document = await self.context.call_provider(
				"weather",
				self.context.weather_provider.point_forecast(self._latitude, self._longitude, self.duration_hours)
			)
			series = ForecastSeries.from_document(document)
		except (ProviderError, ValueError) as e:
			logger.error(f"{self.name}: forecast refresh failed: {str(e)}")
			return False

		if not series:
			logger.error(f"{self.name}: forecast document has no forecast entries, keeping previous forecast")
			return False

		self.forecast_series = series
		logger.info(f"{self.name}: {EVENT_WEATHER_CHANGED}")
		self.events.fire(EVENT_WEATHER_CHANGED, self.owner)
		return True

	async def refresh_place(self) -> bool:
		"""
		Fetches the places at this position and updates the place name.
		Fires place-changed on success.

		Returns:
			True if the place was updated
		"""
		try:
			document = await self.context.call_provider(
				"places",
				self.context.place_provider.places(self._latitude, self._longitude)
			)
		except ProviderError as e:
			logger.error(f"{self.name}: place refresh failed: {str(e)}")
			return False

		places = PlaceParser.parse_places(document)
		if places is None:
			logger.error(f"{self.name}: place document has no results")
			return False

		self.places = places
		self.place_name = PlaceParser.select_place_name(places)
		logger.info(f"{self.name}: {EVENT_PLACE_CHANGED}")
		self.events.fire(EVENT_PLACE_CHANGED, self.owner)
		return True

	# Capabilities

	def move_to(self, latitude: float, longitude: float) -> bool:
		"""
		Moves this scout and starts a forecast/place refresh on the running loop.

		Returns:
			True if the scout was moved, False if it is not movable

		Raises:
			ValidationError: If the position is out of range
		"""
		moved = self.movable.move_to(latitude, longitude)
		if not moved:
			logger.warning(f"{self.name}: is not movable")
		return moved

	def _apply_move(self, latitude: float, longitude: float) -> bool:
		self._validate_position(latitude, longitude)
		self._latitude = latitude
		self._longitude = longitude
		self.events.fire(EVENT_OBJECT_MOVE_FINISHED, self.owner)
		return True

	def _on_move_finished(self, _scout):
		return self.refresh()

	def remove(self) -> bool:
		"""
		Removes this scout from its owner. Fires removed on success.

		Returns:
			True if the scout was removed
		"""
		if not self.removable.remove():
			return False
		self.events.fire(EVENT_OBJECT_REMOVED, self.owner)
		return True

	def dispose(self) -> None:
		"""Release subscriptions held outside this scout. A weather scout holds none."""

	def to_parameters(self) -> ScoutParameters:
		"""Persistable parameters of this scout."""
		return ScoutParameters(
			id=self._id,
			name=self.name,
			latitude=self._latitude,
			longitude=self._longitude,
			is_movable=self.is_movable,
			duration_hours=self.duration_hours,
			scout_type="weather_scout"
		)
