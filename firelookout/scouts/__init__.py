from firelookout.scouts.environmental_scout import EnvironmentalScout
from firelookout.scouts.fire_lookout import FireLookout

__all__ = ["EnvironmentalScout", "FireLookout"]
