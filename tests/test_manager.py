"""
Unit tests for ScoutManager.
"""
import pytest
from unittest.mock import Mock
from firelookout.events import EVENT_OBJECT_REMOVED, EVENT_TIME_CHANGED
from firelookout.exceptions import NotFoundError, ValidationError
from firelookout.manager import ScoutManager
from firelookout.redis_client import ScoutStore
from firelookout.schemas.scout import ScoutParameters
from firelookout.scouts import EnvironmentalScout, FireLookout


@pytest.fixture
def store():
	"""Scout store that holds nothing."""
	store = Mock(spec=ScoutStore)
	store.load_all.return_value = []
	return store


@pytest.fixture
def manager(context, store):
	return ScoutManager(context, store)


class TestScoutCollection:
	"""Test cases for adding, finding and removing scouts."""

	def test_add_scout_and_lookout(self, manager):
		"""Test that created scouts are kept by id."""
		scout = manager.add_scout(34.45, -119.24, name="Camp")
		lookout = manager.add_lookout(34.5, -119.3, fuel_model_no=4)

		assert isinstance(scout, EnvironmentalScout)
		assert isinstance(lookout, FireLookout)
		assert manager.scouts == [scout, lookout]
		assert manager.lookouts == [lookout]
		assert manager.find_scout(lookout.id) is lookout

	def test_duplicate_id_rejected(self, manager, context):
		"""Test that a second scout with the same id is rejected and released."""
		manager.add_lookout(34.45, -119.24, id="lookout-1")

		with pytest.raises(ValidationError):
			manager.add_lookout(34.5, -119.3, id="lookout-1")

		assert len(manager.scouts) == 1
		assert len(context.events._handlers[EVENT_TIME_CHANGED]) == 1

	def test_find_unknown_scout(self, manager):
		"""Test that an unknown id raises NotFoundError."""
		with pytest.raises(NotFoundError):
			manager.find_scout("missing")

	def test_scout_remove_goes_through_manager(self, manager, store):
		"""Test that removing a scout drops it from the manager and the store."""
		scout = manager.add_scout(34.45, -119.24)
		handler = Mock(return_value=None)
		scout.events.on(EVENT_OBJECT_REMOVED, handler)

		assert scout.remove() is True

		assert manager.scouts == []
		store.delete.assert_called_once_with(scout.id)
		handler.assert_called_once_with(scout)

	def test_remove_lookout_stops_clock_refreshes(self, manager, context):
		"""Test that a removed lookout no longer follows the application clock."""
		lookout = manager.add_lookout(34.45, -119.24)

		assert lookout.remove() is True

		assert not context.events.has_handlers(EVENT_TIME_CHANGED)

	def test_remove_unknown_scout(self, manager, store):
		"""Test that removing an unknown id reports False."""
		assert manager.remove_scout("missing") is False
		store.delete.assert_not_called()


class TestScoutPersistence:
	"""Test cases for saving and loading scouts."""

	def test_save_scouts(self, manager, store):
		"""Test that every scout is saved under its key."""
		lookout = manager.add_lookout(34.45, -119.24, fuel_model_no=4, fuel_model_manual_select=True)

		assert manager.save_scouts() == 1

		parameters = store.save.call_args.args[0]
		assert parameters.id == lookout.id
		assert parameters.scout_type == "fire_lookout"
		assert parameters.fuel_model_no == 4
		assert parameters.fuel_model_manual_select is True

	def test_load_scouts(self, manager, store):
		"""Test that saved parameters are restored and invalid ones are skipped."""
		store.load_all.return_value = [
			ScoutParameters(
				id="a",
				name="Ojai Lookout",
				latitude=34.45,
				longitude=-119.24,
				scout_type="fire_lookout",
				fuel_model_no=8,
				fuel_model_manual_select=True,
				moisture_scenario_name="Low Dead, Fully Cured Herb"
			),
			ScoutParameters(id="b", name="Camp", latitude=34.5, longitude=-119.3, duration_hours=24),
			ScoutParameters(id="c", name="Bad", latitude=34.6, longitude=-119.4, scout_type="fire_lookout", fuel_model_no=99)
		]

		restored = manager.load_scouts()

		assert [scout.id for scout in restored] == ["a", "b"]
		lookout = manager.find_scout("a")
		assert lookout.fuel_model_no == 8
		assert lookout.fuel_model_manual_select is True
		assert lookout.fuel_moisture.dead_1hr_fuel_moisture == 6
		assert manager.find_scout("b").duration_hours == 24

	def test_load_skips_existing_scouts(self, manager, store):
		"""Test that scouts already in the collection are not restored again."""
		scout = manager.add_scout(34.45, -119.24, id="a")
		store.load_all.return_value = [
			ScoutParameters(id="a", name="Other", latitude=1.0, longitude=1.0)
		]

		assert manager.load_scouts() == []
		assert manager.find_scout("a") is scout

	def test_without_store(self, context):
		"""Test that saving and loading without a store does nothing."""
		manager = ScoutManager(context)
		manager.add_scout(34.45, -119.24)

		assert manager.save_scouts() == 0
		assert manager.load_scouts() == []
