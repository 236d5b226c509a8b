"""
Interfaces of the remote data sources consumed by scouts and lookouts.
The http_client package holds the REST implementations; tests substitute their own.
"""
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Dict, Optional
from firelookout.schemas.fuel import FuelModel, FuelMoisture
from firelookout.schemas.terrain import TerrainSample


class WeatherProvider(ABC):
	@abstractmethod
	async def point_forecast(self, latitude: float, longitude: float, duration_hours: int) -> Dict[str, Any]:
		"""Raw spatio-temporal point forecast document."""


class PlaceProvider(ABC):
	@abstractmethod
	async def places(self, latitude: float, longitude: float) -> Dict[str, Any]:
		"""Raw place document, places ordered from finest to coarsest granularity."""


class SunlightProvider(ABC):
	@abstractmethod
	async def sunlight_at_lat_lon_time(self, latitude: float, longitude: float, time: datetime) -> Dict[str, Any]:
		"""Sunlight record (sun position, sunrise, sunset) at a place and time."""


class SurfaceFuelProvider(ABC):
	@abstractmethod
	async def conditioned_surface_fuel(
		self,
		fuel_model: FuelModel,
		sunlight: Dict[str, Any],
		weather_tuple: Dict[str, Any],
		terrain_tuple: Dict[str, Any],
		shaded: bool,
		fuel_moisture: FuelMoisture
	) -> Optional[Dict[str, Any]]:
		"""
		Fuel conditioned by sunlight, weather, terrain and moisture.
		Returns None when the provider reports that no result is available.
		"""


class SurfaceFireProvider(ABC):
	@abstractmethod
	async def surface_fire(
		self,
		surface_fuel: Dict[str, Any],
		weather_tuple: Dict[str, Any],
		terrain_tuple: Dict[str, Any]
	) -> Dict[str, Any]:
		"""Surface fire behavior record."""


class FuelModelProvider(ABC):
	@abstractmethod
	async def fbfm13(self, latitude: float, longitude: float) -> int:
		"""Fire behavior fuel model number (1-13) mapped at a location."""


class TerrainSource(ABC):
	@abstractmethod
	def sample_at(self, latitude: float, longitude: float) -> TerrainSample:
		"""Terrain at a location. Synchronous: reads locally held data only."""
