"""
Fire lookout: a weather scout that also keeps a surface fire behavior estimate current.
"""
import asyncio
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional
from firelookout.capabilities import Movable, Removable
from firelookout.config import settings
from firelookout.context import LookoutContext
from firelookout.events import (
	EventBus,
	EVENT_WEATHER_CHANGED,
	EVENT_PLACE_CHANGED,
	EVENT_FIRE_BEHAVIOR_CHANGED,
	EVENT_TIME_CHANGED
)
from firelookout.exceptions import CatalogLookupError, ProviderError
from firelookout.schemas.fuel import FuelModel, FuelMoisture, FuelMoistureScenario
from firelookout.schemas.scout import ScoutParameters
from firelookout.schemas.terrain import TerrainSample, ZERO_TERRAIN
from firelookout.schemas.weather import WeatherSample
from firelookout.scouts.environmental_scout import EnvironmentalScout
from firelookout.weather.forecast_series import ForecastSeries, sample_at
import logging

logger = logging.getLogger(__name__)


class FireLookout:
	"""
	Contains an EnvironmentalScout for its position, forecast and place, and adds
	fuel state and the fire behavior refresh pipeline.

	Refresh triggers:
	- weather-changed (own scout) -> refresh_fire_behavior
	- place-changed (own scout) -> refresh_fuel_model, which refreshes fire behavior
	- application-time-changed (process-wide) -> refresh_fire_behavior

	A pass fetches sunlight, then conditioned fuel, then surface fire behavior. At most one
	pass runs at a time: triggers that arrive while a pass is running collapse into a single
	pending pass, started as soon as the running one ends, with the state current at that time.
	"""

	DEFAULT_NAME = "Fire Lookout"

	def __init__(
		self,
		context: LookoutContext,
		latitude: float,
		longitude: float,
		id: Optional[str] = None,
		name: Optional[str] = None,
		is_movable: bool = True,
		duration_hours: Optional[int] = None,
		fuel_model_no: Optional[int] = None,
		fuel_model_manual_select: bool = False,
		moisture_scenario_name: Optional[str] = None,
		on_remove: Optional[Callable[[], Any]] = None
	):
		self.context = context
		self.scout = EnvironmentalScout(
			context,
			latitude,
			longitude,
			id=id,
			name=name or self.DEFAULT_NAME,
			is_movable=is_movable,
			duration_hours=duration_hours,
			owner=self,
			on_remove=on_remove
		)

		# Persistent properties
		self.fuel_model: Optional[FuelModel] = None
		self.moisture_scenario: Optional[FuelMoistureScenario] = None
		self.fuel_moisture: Optional[FuelMoisture] = None
		self.fuel_model_no = fuel_model_no if fuel_model_no is not None else settings.default_fuel_model_no
		self.fuel_model_manual_select = fuel_model_manual_select
		self.moisture_scenario_name = moisture_scenario_name or settings.default_fuel_moisture_scenario

		# Dynamic properties
		self.active_weather: Optional[WeatherSample] = None
		self.terrain: TerrainSample = ZERO_TERRAIN
		self.sunlight: Optional[Dict[str, Any]] = None
		self.surface_fuel: Optional[Dict[str, Any]] = None
		self.surface_fire: Optional[Dict[str, Any]] = None

		# Pipeline coordination
		self._refresh_in_progress = False
		self._refresh_pending = False
		self._refresh_task: Optional[asyncio.Task] = None

		self.events.on(EVENT_WEATHER_CHANGED, self.refresh_fire_behavior)
		self.events.on(EVENT_PLACE_CHANGED, self.refresh_fuel_model)
		self.context.events.on(EVENT_TIME_CHANGED, self.refresh_fire_behavior)

	# Scout core

	@property
	def id(self) -> str:
		return self.scout.id

	@property
	def name(self) -> str:
		return self.scout.name

	@name.setter
	def name(self, value: str):
		self.scout.name = value

	@property
	def latitude(self) -> float:
		return self.scout.latitude

	@property
	def longitude(self) -> float:
		return self.scout.longitude

	@property
	def is_movable(self) -> bool:
		return self.scout.is_movable

	@is_movable.setter
	def is_movable(self, value: bool):
		self.scout.is_movable = value

	@property
	def duration_hours(self) -> int:
		return self.scout.duration_hours

	@duration_hours.setter
	def duration_hours(self, value: int):
		self.scout.duration_hours = value

	@property
	def events(self) -> EventBus:
		return self.scout.events

	@property
	def forecast_series(self) -> Optional[ForecastSeries]:
		return self.scout.forecast_series

	@property
	def place_name(self) -> Optional[str]:
		return self.scout.place_name

	@property
	def location(self) -> str:
		return self.scout.location

	@property
	def movable(self) -> Movable:
		return self.scout.movable

	@property
	def removable(self) -> Removable:
		return self.scout.removable

	def get_first_forecast(self) -> WeatherSample:
		return self.scout.get_first_forecast()

	def get_forecast_at_time(self, time: Optional[datetime]) -> WeatherSample:
		return self.scout.get_forecast_at_time(time)

	def get_forecasts(self) -> List[WeatherSample]:
		return self.scout.get_forecasts()

	async def refresh(self) -> None:
		await self.scout.refresh()

	async def refresh_forecast(self) -> bool:
		return await self.scout.refresh_forecast()

	async def refresh_place(self) -> bool:
		return await self.scout.refresh_place()

	def move_to(self, latitude: float, longitude: float) -> bool:
		return self.scout.move_to(latitude, longitude)

	def remove(self) -> bool:
		return self.scout.remove()

	def dispose(self) -> None:
		"""Stop following the application clock."""
		self.context.events.off(EVENT_TIME_CHANGED, self.refresh_fire_behavior)

	# Fuel selection

	@property
	def fuel_model_no(self) -> Optional[int]:
		"""The fuel model number; setting it resolves the fuel model from the catalog."""
		return self.fuel_model.model_no if self.fuel_model else None

	@fuel_model_no.setter
	def fuel_model_no(self, value: int):
		self.fuel_model = self.context.fuel_model_catalog.get_fuel_model(value)

	@property
	def moisture_scenario_name(self) -> Optional[str]:
		"""The fuel moisture scenario name; setting it resolves the scenario and fuel moisture."""
		return self.moisture_scenario.name if self.moisture_scenario else None

	@moisture_scenario_name.setter
	def moisture_scenario_name(self, value: str):
		scenario = self.context.fuel_moisture_catalog.get_scenario(value)
		self.moisture_scenario = scenario
		self.fuel_moisture = scenario.fuel_moisture

	async def refresh_fuel_model(self, _scout: Any = None) -> bool:
		"""
		Looks up the fuel model mapped at this position and refreshes the fire behavior.
		Skipped when the fuel model was selected manually. On lookup failure the current
		fuel model is kept.

		Returns:
			True if the fuel model was updated
		"""
		if self.fuel_model_manual_select:
			return False
		try:
			fuel_model_no = await self.context.call_provider(
				"landfire",
				self.context.fuel_model_provider.fbfm13(self.latitude, self.longitude)
			)
			self.fuel_model = self.context.fuel_model_catalog.get_fuel_model(fuel_model_no)
		except (ProviderError, CatalogLookupError) as e:
			logger.warning(f"{self.name}: automated fuel model lookup failed, keeping fuel model {self.fuel_model_no}: {e.message}")
			return False

		self.refresh_fire_behavior()
		return True

	# Fire behavior pipeline

	@property
	def refresh_in_progress(self) -> bool:
		return self._refresh_in_progress

	@property
	def refresh_pending(self) -> bool:
		return self._refresh_pending

	@property
	def refresh_task(self) -> Optional[asyncio.Task]:
		"""The task running the current (or last) refresh."""
		return self._refresh_task

	def _has_fuel(self) -> bool:
		if self.fuel_model is None or self.fuel_moisture is None:
			logger.error(f"{self.name}: fuel model and/or fuel moisture is missing, fire behavior not refreshed")
			return False
		return True

	def refresh_fire_behavior(self, _payload: Any = None) -> Optional[asyncio.Task]:
		"""
		Requests a fire behavior refresh. Must be called on the running event loop.

		Returns:
			The task running the refresh when one was started; None when the request was
			queued behind a running refresh or dropped for missing fuel
		"""
		if not self._has_fuel():
			return None
		# Don't queue multiple requests: one more pass runs after the current one finishes
		if self._refresh_in_progress:
			self._refresh_pending = True
			return None
		self._refresh_in_progress = True
		self._refresh_task = asyncio.ensure_future(self._refresh_passes())
		return self._refresh_task

	async def _refresh_passes(self) -> None:
		log_extra = {"extra_fields": {"scout_id": self.id}}
		try:
			while True:
				try:
					await self._run_pass()
				except Exception as e:
					logger.exception(f"{self.name}: fire behavior refresh failed unexpectedly: {str(e)}", extra=log_extra)
				if not self._refresh_pending:
					break
				self._refresh_pending = False
				if not self._has_fuel():
					break
		finally:
			self._refresh_in_progress = False
			self._refresh_pending = False

	def _read_terrain(self) -> TerrainSample:
		try:
			return self.context.terrain_source.sample_at(self.latitude, self.longitude)
		except Exception as e:
			logger.warning(f"{self.name}: terrain unavailable, using flat terrain: {str(e)}")
			return ZERO_TERRAIN

	async def _run_pass(self) -> bool:
		"""
		One pass of the pipeline with the current time, position, weather and fuel.

		Returns:
			True if new fire behavior was published
		"""
		log_extra = {"extra_fields": {"scout_id": self.id}}
		time = self.context.clock.time
		fuel_model = self.fuel_model
		fuel_moisture = self.fuel_moisture

		self.active_weather = sample_at(self.forecast_series, time)
		weather_tuple = self.active_weather.to_tuple()
		self.terrain = self._read_terrain()
		terrain_tuple = self.terrain.to_tuple()

		try:
			self.sunlight = await self.context.call_provider(
				"sunlight",
				self.context.sunlight_provider.sunlight_at_lat_lon_time(self.latitude, self.longitude, time)
			)
			self.surface_fuel = await self.context.call_provider(
				"surface_fuel",
				self.context.surface_fuel_provider.conditioned_surface_fuel(
					fuel_model,
					self.sunlight,
					weather_tuple,
					terrain_tuple,
					False,
					fuel_moisture
				)
			)
			if self.surface_fuel is None:
				logger.warning(f"{self.name}: conditioned surface fuel unavailable, fire behavior not refreshed", extra=log_extra)
				return False

			self.surface_fire = await self.context.call_provider(
				"surface_fire",
				self.context.surface_fire_provider.surface_fire(self.surface_fuel, weather_tuple, terrain_tuple)
			)
		except ProviderError as e:
			logger.error(f"{self.name}: fire behavior refresh failed: {e.message}", extra=log_extra)
			return False

		logger.info(f"{self.name}: {EVENT_FIRE_BEHAVIOR_CHANGED}", extra=log_extra)
		self.events.fire(EVENT_FIRE_BEHAVIOR_CHANGED, self)
		return True

	def to_parameters(self) -> ScoutParameters:
		"""Persistable parameters of this lookout."""
		parameters = self.scout.to_parameters()
		return parameters.model_copy(update={
			"scout_type": "fire_lookout",
			"fuel_model_no": self.fuel_model_no,
			"fuel_model_manual_select": self.fuel_model_manual_select,
			"moisture_scenario_name": self.moisture_scenario_name
		})
