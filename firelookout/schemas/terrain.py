from typing import Any, Dict
from pydantic import ConfigDict
from firelookout.schemas.base import BaseSchema


class TerrainSample(BaseSchema):
	"""Terrain at a point: aspect and slope in degrees, elevation in meters."""
	model_config = ConfigDict(frozen=True)

	aspect: float = 0.0
	slope: float = 0.0
	elevation: float = 0.0

	def to_tuple(self) -> Dict[str, Any]:
		"""Package this sample as the terrain tuple expected by the fuel and fire providers."""
		return {
			"aspect": {"value": self.aspect, "unit": "degrees"},
			"slope": {"value": self.slope, "unit": "degrees"},
			"elevation": {"value": self.elevation, "unit": "meters"}
		}


# Flat terrain at sea level, used whenever no terrain data is available
ZERO_TERRAIN = TerrainSample()
