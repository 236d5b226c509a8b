from firelookout.schemas.base import BaseSchema
from firelookout.schemas.weather import WeatherSample, INVALID_WEATHER, EPOCH
from firelookout.schemas.terrain import TerrainSample, ZERO_TERRAIN
from firelookout.schemas.fuel import FuelModel, FuelMoisture, FuelMoistureScenario
from firelookout.schemas.scout import ScoutParameters

__all__ = [
	"BaseSchema",
	"WeatherSample",
	"INVALID_WEATHER",
	"EPOCH",
	"TerrainSample",
	"ZERO_TERRAIN",
	"FuelModel",
	"FuelMoisture",
	"FuelMoistureScenario",
	"ScoutParameters"
]
