"""
Collaborators shared by all scouts: clock, process-wide events, providers and catalogs.
"""
import asyncio
from typing import Any, Awaitable, Optional
from firelookout.catalogs import FuelModelCatalog, FuelMoistureCatalog
from firelookout.clock import ApplicationClock
from firelookout.config import settings
from firelookout.events import EventBus
from firelookout.exceptions import ProviderTimeoutError
from firelookout.providers import (
	WeatherProvider,
	PlaceProvider,
	SunlightProvider,
	SurfaceFuelProvider,
	SurfaceFireProvider,
	FuelModelProvider,
	TerrainSource
)
from firelookout.terrain import TerrainCache
import logging

logger = logging.getLogger(__name__)


class LookoutContext:
	"""
	Passed to every scout at construction; nothing is looked up globally at call time.
	"""

	def __init__(
		self,
		weather_provider: WeatherProvider,
		place_provider: PlaceProvider,
		sunlight_provider: SunlightProvider,
		surface_fuel_provider: SurfaceFuelProvider,
		surface_fire_provider: SurfaceFireProvider,
		fuel_model_provider: FuelModelProvider,
		terrain_source: Optional[TerrainSource] = None,
		fuel_model_catalog: Optional[FuelModelCatalog] = None,
		fuel_moisture_catalog: Optional[FuelMoistureCatalog] = None,
		events: Optional[EventBus] = None,
		clock: Optional[ApplicationClock] = None,
		provider_timeout: Optional[float] = settings.provider_timeout
	):
		self.weather_provider = weather_provider
		self.place_provider = place_provider
		self.sunlight_provider = sunlight_provider
		self.surface_fuel_provider = surface_fuel_provider
		self.surface_fire_provider = surface_fire_provider
		self.fuel_model_provider = fuel_model_provider
		self.terrain_source = terrain_source or TerrainCache()
		self.fuel_model_catalog = fuel_model_catalog or FuelModelCatalog()
		self.fuel_moisture_catalog = fuel_moisture_catalog or FuelMoistureCatalog()
		self.events = events or EventBus("application")
		self.clock = clock or ApplicationClock(self.events)
		self.provider_timeout = provider_timeout

	@classmethod
	def from_settings(cls, **overrides) -> "LookoutContext":
		"""Build a context with the REST clients configured in settings."""
		from firelookout.http_client.weather_client import WeatherClient, PlaceClient
		from firelookout.http_client.fire_client import SunlightClient, SurfaceFuelClient, SurfaceFireClient, LandfireClient

		providers = {
			"weather_provider": WeatherClient(),
			"place_provider": PlaceClient(),
			"sunlight_provider": SunlightClient(),
			"surface_fuel_provider": SurfaceFuelClient(),
			"surface_fire_provider": SurfaceFireClient(),
			"fuel_model_provider": LandfireClient()
		}
		providers.update(overrides)
		return cls(**providers)

	async def call_provider(self, provider_name: str, call: Awaitable[Any]) -> Any:
		"""
		Await a provider call, bounded by the provider timeout.

		Raises:
			ProviderTimeoutError: If the call does not complete in time
		"""
		if self.provider_timeout is None:
			return await call
		try:
			return await asyncio.wait_for(call, timeout=self.provider_timeout)
		except asyncio.TimeoutError:
			raise ProviderTimeoutError(provider_name, self.provider_timeout)

	async def close(self):
		"""Close every provider that holds a connection pool."""
		for provider in (
			self.weather_provider,
			self.place_provider,
			self.sunlight_provider,
			self.surface_fuel_provider,
			self.surface_fire_provider,
			self.fuel_model_provider
		):
			close = getattr(provider, "close", None)
			if close is not None:
				await close()
