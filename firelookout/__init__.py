"""
Fire lookouts: map points that keep weather, fuel and fire behavior estimates current.
"""
from firelookout.context import LookoutContext
from firelookout.manager import ScoutManager
from firelookout.scouts import EnvironmentalScout, FireLookout

__all__ = ["LookoutContext", "ScoutManager", "EnvironmentalScout", "FireLookout"]
