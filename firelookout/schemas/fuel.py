from typing import Optional
from pydantic import ConfigDict
from firelookout.schemas.base import BaseSchema


class FuelModel(BaseSchema):
	"""
	A standard fire behavior fuel model (Anderson's original 13).
	"""
	# Field names start with "model_"
	model_config = ConfigDict(protected_namespaces=())

	model_no: int
	model_code: str
	model_name: str
	model_group: str


class FuelMoisture(BaseSchema):
	"""Fuel moisture percentages by fuel class."""
	dead_1hr_fuel_moisture: float
	dead_10hr_fuel_moisture: float
	dead_100hr_fuel_moisture: float
	live_herb_fuel_moisture: float
	live_woody_fuel_moisture: float


class FuelMoistureScenario(BaseSchema):
	"""A named fuel moisture scenario."""
	name: str
	description: Optional[str] = None
	fuel_moisture: FuelMoisture
