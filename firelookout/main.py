"""
Service entry point: restores the saved scouts, refreshes them once and saves them back.
"""
import asyncio
import logging
from firelookout.config import settings
from firelookout.context import LookoutContext
from firelookout.logging_config import setup_logging
from firelookout.manager import ScoutManager
from firelookout.redis_client import ScoutStore

logger = logging.getLogger(__name__)


async def wait_for_refreshes() -> None:
	"""Wait until every task started by scout events has finished, including tasks they start."""
	current = asyncio.current_task()
	while True:
		pending = [task for task in asyncio.all_tasks() if task is not current and not task.done()]
		if not pending:
			return
		results = await asyncio.gather(*pending, return_exceptions=True)
		for result in results:
			if isinstance(result, Exception):
				logger.error(f"Refresh task failed: {str(result)}")


async def refresh_saved_scouts(context: LookoutContext, store: ScoutStore) -> ScoutManager:
	"""
	Load the saved scouts, refresh their forecast, place and fire behavior, and save them.

	Args:
		context: Shared providers, clock and catalogs
		store: Scout parameter store

	Returns:
		The manager holding the refreshed scouts
	"""
	manager = ScoutManager(context, store)
	scouts = manager.load_scouts()
	logger.info(f"Loaded {len(scouts)} scouts")

	await asyncio.gather(*(scout.refresh() for scout in scouts))
	await wait_for_refreshes()

	for lookout in manager.lookouts:
		logger.info(f"{lookout.name} ({lookout.place_name}): surface fire {lookout.surface_fire}")
	saved = manager.save_scouts()
	logger.info(f"Saved {saved} scouts")
	return manager


async def run() -> None:
	store = ScoutStore()
	store.ping()
	context = LookoutContext.from_settings()
	try:
		await refresh_saved_scouts(context, store)
	finally:
		await context.close()


def main() -> None:
	setup_logging(level=settings.log_level)
	asyncio.run(run())


if __name__ == "__main__":
	main()
