"""
Fuel model and fuel moisture scenario lookup tables.
"""
from typing import Dict, Iterable, List, Optional
from firelookout.schemas.fuel import FuelModel, FuelMoisture, FuelMoistureScenario
from firelookout.exceptions import CatalogLookupError
import logging

logger = logging.getLogger(__name__)


STANDARD_FUEL_MODELS = [
	FuelModel(model_no=1, model_code="#1", model_name="Short grass", model_group="Original 13"),
	FuelModel(model_no=2, model_code="#2", model_name="Timber grass and understory", model_group="Original 13"),
	FuelModel(model_no=3, model_code="#3", model_name="Tall grass", model_group="Original 13"),
	FuelModel(model_no=4, model_code="#4", model_name="Chaparral", model_group="Original 13"),
	FuelModel(model_no=5, model_code="#5", model_name="Brush", model_group="Original 13"),
	FuelModel(model_no=6, model_code="#6", model_name="Dormant brush", model_group="Original 13"),
	FuelModel(model_no=7, model_code="#7", model_name="Southern rough", model_group="Original 13"),
	FuelModel(model_no=8, model_code="#8", model_name="Short needle litter", model_group="Original 13"),
	FuelModel(model_no=9, model_code="#9", model_name="Long needle or hardwood litter", model_group="Original 13"),
	FuelModel(model_no=10, model_code="#10", model_name="Timber litter & understory", model_group="Original 13"),
	FuelModel(model_no=11, model_code="#11", model_name="Light logging slash", model_group="Original 13"),
	FuelModel(model_no=12, model_code="#12", model_name="Medium logging slash", model_group="Original 13"),
	FuelModel(model_no=13, model_code="#13", model_name="Heavy logging slash", model_group="Original 13"),
]


def _scenario(name: str, dead: tuple, live: tuple) -> FuelMoistureScenario:
	return FuelMoistureScenario(
		name=name,
		fuel_moisture=FuelMoisture(
			dead_1hr_fuel_moisture=dead[0],
			dead_10hr_fuel_moisture=dead[1],
			dead_100hr_fuel_moisture=dead[2],
			live_herb_fuel_moisture=live[0],
			live_woody_fuel_moisture=live[1]
		)
	)


# Scott & Burgan dead (D1-D4) and live (L1-L4) moisture levels
STANDARD_MOISTURE_SCENARIOS = [
	_scenario("Very Low Dead, Fully Cured Herb", (3, 4, 5), (30, 60)),
	_scenario("Very Low Dead, Two-Thirds Cured Herb", (3, 4, 5), (60, 90)),
	_scenario("Very Low Dead, One-Third Cured Herb", (3, 4, 5), (90, 120)),
	_scenario("Very Low Dead, Fully Green Herb", (3, 4, 5), (120, 150)),
	_scenario("Low Dead, Fully Cured Herb", (6, 7, 8), (30, 60)),
	_scenario("Low Dead, Two-Thirds Cured Herb", (6, 7, 8), (60, 90)),
	_scenario("Low Dead, One-Third Cured Herb", (6, 7, 8), (90, 120)),
	_scenario("Low Dead, Fully Green Herb", (6, 7, 8), (120, 150)),
	_scenario("Moderate Dead, Fully Cured Herb", (9, 10, 11), (30, 60)),
	_scenario("Moderate Dead, Two-Thirds Cured Herb", (9, 10, 11), (60, 90)),
	_scenario("Moderate Dead, One-Third Cured Herb", (9, 10, 11), (90, 120)),
	_scenario("Moderate Dead, Fully Green Herb", (9, 10, 11), (120, 150)),
	_scenario("High Dead, Fully Cured Herb", (12, 13, 14), (30, 60)),
	_scenario("High Dead, Two-Thirds Cured Herb", (12, 13, 14), (60, 90)),
	_scenario("High Dead, One-Third Cured Herb", (12, 13, 14), (90, 120)),
	_scenario("High Dead, Fully Green Herb", (12, 13, 14), (120, 150)),
]


class FuelModelCatalog:
	"""Fuel models keyed by model number."""

	def __init__(self, models: Optional[Iterable[FuelModel]] = None):
		self._models: Dict[int, FuelModel] = {
			model.model_no: model for model in (models if models is not None else STANDARD_FUEL_MODELS)
		}

	@property
	def models(self) -> List[FuelModel]:
		return list(self._models.values())

	def get_fuel_model(self, model_no: int) -> FuelModel:
		"""
		Look up a fuel model.

		Raises:
			CatalogLookupError: If the model number is not in the catalog
		"""
		try:
			return self._models[int(model_no)]
		except (KeyError, TypeError, ValueError):
			raise CatalogLookupError("Fuel model", str(model_no))


class FuelMoistureCatalog:
	"""Fuel moisture scenarios keyed by name."""

	def __init__(self, scenarios: Optional[Iterable[FuelMoistureScenario]] = None):
		self._scenarios: Dict[str, FuelMoistureScenario] = {
			scenario.name: scenario for scenario in (scenarios if scenarios is not None else STANDARD_MOISTURE_SCENARIOS)
		}

	@property
	def scenarios(self) -> List[FuelMoistureScenario]:
		return list(self._scenarios.values())

	def get_scenario(self, name: str) -> FuelMoistureScenario:
		"""
		Look up a fuel moisture scenario.

		Raises:
			CatalogLookupError: If the scenario name is not in the catalog
		"""
		if name not in self._scenarios:
			raise CatalogLookupError("Fuel moisture scenario", str(name))
		return self._scenarios[name]
