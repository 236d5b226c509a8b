"""
Clients for the sunlight, surface fuel, surface fire and LANDFIRE services.
"""
from datetime import datetime
from typing import Optional, Dict, Any
from firelookout.http_client.base_client import BaseHTTPClient
from firelookout.providers import SunlightProvider, SurfaceFuelProvider, SurfaceFireProvider, FuelModelProvider
from firelookout.schemas.fuel import FuelModel, FuelMoisture
from firelookout.utils.datetime_utils import ensure_utc
from firelookout.config import settings
from firelookout.exceptions import ProviderError
import logging

logger = logging.getLogger(__name__)


class SunlightClient(BaseHTTPClient, SunlightProvider):
	"""Solar position and sunrise/sunset client."""

	provider_name = "sunlight"

	def __init__(self, base_url: str = settings.sunlight_base_url, **kwargs):
		super().__init__(base_url, **kwargs)

	async def sunlight_at_lat_lon_time(self, latitude: float, longitude: float, time: datetime) -> Dict[str, Any]:
		"""
		Get the sunlight at a place and time.

		Args:
			latitude: Latitude in degrees
			longitude: Longitude in degrees
			time: Time of interest (naive values are treated as UTC)

		Returns:
			Sunlight record
		"""
		sunlight = await self.get(
			"/",
			params={"latitude": latitude, "longitude": longitude, "time": ensure_utc(time).isoformat()}
		)
		if sunlight is None:
			raise ProviderError(self.provider_name, "empty sunlight record")
		return sunlight


class SurfaceFuelClient(BaseHTTPClient, SurfaceFuelProvider):
	"""Conditioned surface fuel client."""

	provider_name = "surface_fuel"

	def __init__(self, base_url: str = settings.surface_fuel_base_url, **kwargs):
		super().__init__(base_url, **kwargs)

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
		Condition a fuel model for the given environment.

		Returns:
			Conditioned fuel record, or None when the service has no result
		"""
		return await self.post(
			"/",
			json={
				"fuelModel": fuel_model.to_dict(),
				"sunlight": sunlight,
				"weather": weather_tuple,
				"terrain": terrain_tuple,
				"shaded": shaded,
				"fuelMoisture": fuel_moisture.to_dict()
			}
		)


class SurfaceFireClient(BaseHTTPClient, SurfaceFireProvider):
	"""Surface fire behavior client."""

	provider_name = "surface_fire"

	def __init__(self, base_url: str = settings.surface_fire_base_url, **kwargs):
		super().__init__(base_url, **kwargs)

	async def surface_fire(
		self,
		surface_fuel: Dict[str, Any],
		weather_tuple: Dict[str, Any],
		terrain_tuple: Dict[str, Any]
	) -> Dict[str, Any]:
		"""
		Compute the surface fire behavior for a conditioned fuel.

		Returns:
			Fire behavior record
		"""
		fire = await self.post(
			"/",
			json={"fuel": surface_fuel, "weather": weather_tuple, "terrain": terrain_tuple}
		)
		if fire is None:
			raise ProviderError(self.provider_name, "empty fire behavior record")
		return fire


class LandfireClient(BaseHTTPClient, FuelModelProvider):
	"""LANDFIRE fuel model lookup client."""

	provider_name = "landfire"

	def __init__(self, base_url: str = settings.landfire_base_url, **kwargs):
		super().__init__(base_url, **kwargs)

	async def fbfm13(self, latitude: float, longitude: float) -> int:
		"""
		Get the 13 standard fire behavior fuel model number mapped at a location.

		Returns:
			Fuel model number

		Raises:
			ProviderError: If the service fails or the answer is not a fuel model number
		"""
		result = await self.get("/fbfm13", params={"latitude": latitude, "longitude": longitude})
		value = result.get("fuelModelNo") if isinstance(result, dict) else result
		try:
			return int(value)
		except (TypeError, ValueError):
			raise ProviderError(self.provider_name, f"unexpected fbfm13 value: {value!r}")
