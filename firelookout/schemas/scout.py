from typing import Literal, Optional
from pydantic import Field
from firelookout.schemas.base import BaseSchema

ScoutType = Literal["weather_scout", "fire_lookout"]


class ScoutParameters(BaseSchema):
	"""
	Persisted parameters of a weather scout or fire lookout.
	Derived state (forecast, sunlight, fuel, fire behavior) is never persisted;
	it is recomputed after the scout is restored.
	"""
	id: str
	name: str
	latitude: float = Field(ge=-90.0, le=90.0)
	longitude: float = Field(ge=-180.0, le=180.0)
	is_movable: bool = True
	duration_hours: int = Field(default=72, gt=0)
	scout_type: ScoutType = "weather_scout"

	# Fire lookouts only
	fuel_model_no: Optional[int] = None
	fuel_model_manual_select: bool = False
	moisture_scenario_name: Optional[str] = None
