"""
Locally held terrain samples.
"""
from typing import Dict, Tuple
from firelookout.providers import TerrainSource
from firelookout.schemas.terrain import TerrainSample, ZERO_TERRAIN


class TerrainCache(TerrainSource):
	"""
	Terrain samples keyed by position rounded to a grid.
	Positions without a sample read as flat terrain at sea level.
	"""

	def __init__(self, precision: int = 4):
		self.precision = precision
		self._samples: Dict[Tuple[float, float], TerrainSample] = {}

	def _key(self, latitude: float, longitude: float) -> Tuple[float, float]:
		return (round(latitude, self.precision), round(longitude, self.precision))

	def put(self, latitude: float, longitude: float, sample: TerrainSample) -> None:
		self._samples[self._key(latitude, longitude)] = sample

	def sample_at(self, latitude: float, longitude: float) -> TerrainSample:
		return self._samples.get(self._key(latitude, longitude), ZERO_TERRAIN)

	def __len__(self) -> int:
		return len(self._samples)
