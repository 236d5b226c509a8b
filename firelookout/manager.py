import logging
from typing import Dict, List, Optional, Union
from firelookout.context import LookoutContext
from firelookout.exceptions import CatalogLookupError, NotFoundError, ValidationError
from firelookout.redis_client import ScoutStore
from firelookout.schemas.scout import ScoutParameters
from firelookout.scouts import EnvironmentalScout, FireLookout

logger = logging.getLogger(__name__)

Scout = Union[EnvironmentalScout, FireLookout]


class ScoutManager:
	"""
	Owns the weather scouts and fire lookouts of one application, keyed by id.

	Scouts are created through the manager so that their Removable capability
	removes them from this collection. Scout parameters can be saved to and
	restored from Redis; derived state is recomputed by refreshing after a load.
	"""

	def __init__(self, context: LookoutContext, store: Optional[ScoutStore] = None):
		self.context = context
		self.store = store
		self._scouts: Dict[str, Scout] = {}

	@property
	def scouts(self) -> List[Scout]:
		return list(self._scouts.values())

	@property
	def lookouts(self) -> List[FireLookout]:
		return [scout for scout in self._scouts.values() if isinstance(scout, FireLookout)]

	def add_scout(self, latitude: float, longitude: float, **params) -> EnvironmentalScout:
		"""
		Create a weather scout owned by this manager.

		Args:
			latitude: Latitude in degrees
			longitude: Longitude in degrees
			**params: id, name, is_movable, duration_hours

		Returns:
			The new scout
		"""
		scout = EnvironmentalScout(self.context, latitude, longitude, **params)
		return self._register(scout)

	def add_lookout(self, latitude: float, longitude: float, **params) -> FireLookout:
		"""
		Create a fire lookout owned by this manager.

		Args:
			latitude: Latitude in degrees
			longitude: Longitude in degrees
			**params: id, name, is_movable, duration_hours, fuel_model_no,
				fuel_model_manual_select, moisture_scenario_name

		Returns:
			The new lookout

		Raises:
			CatalogLookupError: If the fuel model or moisture scenario is unknown
		"""
		lookout = FireLookout(self.context, latitude, longitude, **params)
		return self._register(lookout)

	def _register(self, scout: Scout) -> Scout:
		if scout.id in self._scouts:
			scout.dispose()
			raise ValidationError(f"Scout id {scout.id} is already in use")
		scout.removable.on_remove = lambda: self.remove_scout(scout.id)
		self._scouts[scout.id] = scout
		logger.info(f"Added {type(scout).__name__} {scout.id} ({scout.name})")
		return scout

	def find_scout(self, scout_id: str) -> Scout:
		"""
		Raises:
			NotFoundError: If no scout has this id
		"""
		scout = self._scouts.get(scout_id)
		if scout is None:
			raise NotFoundError("Scout", scout_id)
		return scout

	def remove_scout(self, scout_id: str) -> bool:
		"""
		Remove a scout from the collection and from the store.

		Returns:
			True if the scout was removed, False if it was not found
		"""
		scout = self._scouts.pop(scout_id, None)
		if scout is None:
			logger.warning(f"Scout {scout_id} not found for removal")
			return False
		scout.dispose()
		if self.store is not None:
			self.store.delete(scout_id)
		logger.info(f"Removed scout {scout_id}")
		return True

	def save_scouts(self) -> int:
		"""
		Persist the parameters of every scout.

		Returns:
			Number of scouts saved
		"""
		if self.store is None:
			logger.warning("No scout store configured, scouts not saved")
			return 0
		for scout in self._scouts.values():
			self.store.save(scout.to_parameters())
		return len(self._scouts)

	def load_scouts(self) -> List[Scout]:
		"""
		Restore the persisted scouts that are not already in the collection.
		Scouts whose parameters no longer resolve are skipped.

		Returns:
			The restored scouts (not yet refreshed)
		"""
		if self.store is None:
			logger.warning("No scout store configured, scouts not loaded")
			return []
		restored = []
		for parameters in self.store.load_all():
			if parameters.id in self._scouts:
				continue
			try:
				restored.append(self._restore(parameters))
			except (CatalogLookupError, ValidationError) as e:
				logger.warning(f"Skipping scout {parameters.id}: {str(e)}")
		return restored

	def _restore(self, parameters: ScoutParameters) -> Scout:
		common = {
			"id": parameters.id,
			"name": parameters.name,
			"is_movable": parameters.is_movable,
			"duration_hours": parameters.duration_hours
		}
		if parameters.scout_type == "fire_lookout":
			return self.add_lookout(
				parameters.latitude,
				parameters.longitude,
				fuel_model_no=parameters.fuel_model_no,
				fuel_model_manual_select=parameters.fuel_model_manual_select,
				moisture_scenario_name=parameters.moisture_scenario_name,
				**common
			)
		return self.add_scout(parameters.latitude, parameters.longitude, **common)
