"""
Pytest configuration and fixtures.
"""
import pytest
from datetime import datetime, timezone
from unittest.mock import AsyncMock, Mock
from firelookout.context import LookoutContext
from firelookout.events import EventBus
from firelookout.clock import ApplicationClock
from firelookout.terrain import TerrainCache


START_TIME = datetime(2016, 3, 15, 0, 0, tzinfo=timezone.utc)


def make_forecast_document(entries):
	"""Wrap (iso_time, values) pairs in a spatio-temporal weather document."""
	return {
		"spatioTemporalWeather": {
			"range": {
				"temporalWeather": ["Air Temperature (F)", "Relative Humidity (%)", "Wind Speed (kts)", "Wind Direction (deg)", "Sky Cover (%)"]
			},
			"spatialDomain": {
				"temporalDomain": {
					"temporalWeather": [{"@time": time, "values": values} for time, values in entries]
				}
			}
		}
	}


@pytest.fixture
def forecast_document():
	"""Three hourly-ish forecast entries two hours apart."""
	return make_forecast_document([
		("2016-03-15T00:00:00Z", ["72.9", "20", "10", "270", "0"]),
		("2016-03-15T02:00:00Z", ["75", "18", "12", "280", "10"]),
		("2016-03-15T04:00:00Z", ["78", "15", "15", "290", "25"])
	])


@pytest.fixture
def place_document():
	"""Place document ordered from finest to coarsest granularity."""
	return {
		"query": {
			"count": 3,
			"results": {
				"place": [
					{"name": "93023", "placeTypeName": {"content": "Zip Code"}},
					{"name": "Ojai", "placeTypeName": {"content": "Town"}},
					{"name": "Ventura", "placeTypeName": {"content": "County"}}
				]
			}
		}
	}


@pytest.fixture
def sunlight_record():
	return {"sunAzimuth": 180.0, "sunAltitude": 45.0, "sunrise": "06:58", "sunset": "19:02"}


@pytest.fixture
def surface_fuel_record():
	return {"fuelModel": {"modelNo": 5}, "dead1HrFuelMoisture": 4.0, "fuelTemperature": 85.0}


@pytest.fixture
def surface_fire_record():
	return {"rateOfSpreadMax": 12.5, "flameLength": 4.2, "directionMaxSpread": 270}


@pytest.fixture
def mock_providers(forecast_document, place_document, sunlight_record, surface_fuel_record, surface_fire_record):
	"""Providers that answer immediately with the sample records."""
	weather = Mock()
	weather.point_forecast = AsyncMock(return_value=forecast_document)
	places = Mock()
	places.places = AsyncMock(return_value=place_document)
	sunlight = Mock()
	sunlight.sunlight_at_lat_lon_time = AsyncMock(return_value=sunlight_record)
	surface_fuel = Mock()
	surface_fuel.conditioned_surface_fuel = AsyncMock(return_value=surface_fuel_record)
	surface_fire = Mock()
	surface_fire.surface_fire = AsyncMock(return_value=surface_fire_record)
	landfire = Mock()
	landfire.fbfm13 = AsyncMock(return_value=4)
	return {
		"weather_provider": weather,
		"place_provider": places,
		"sunlight_provider": sunlight,
		"surface_fuel_provider": surface_fuel,
		"surface_fire_provider": surface_fire,
		"fuel_model_provider": landfire
	}


@pytest.fixture
def context(mock_providers):
	"""Context with mock providers, an empty terrain cache and the clock at START_TIME."""
	events = EventBus("application")
	return LookoutContext(
		terrain_source=TerrainCache(),
		events=events,
		clock=ApplicationClock(events, START_TIME),
		provider_timeout=5.0,
		**mock_providers
	)


@pytest.fixture
def make_document():
	"""Factory for forecast documents built from (iso_time, values) pairs."""
	return make_forecast_document
