"""
Capabilities a scout can be given by composition.
Each capability holds a delegate callback; the callback decides whether the action happens.
"""
from typing import Any, Callable, Optional


class Movable:
	"""
	Allows a scout to be moved. The delegate receives the new latitude and longitude
	and returns True when the move was applied.
	"""

	def __init__(self, on_move: Callable[[float, float], bool], enabled: bool = True):
		self.on_move = on_move
		self.enabled = enabled

	def move_to(self, latitude: float, longitude: float) -> bool:
		if not self.enabled:
			return False
		return bool(self.on_move(latitude, longitude))


class Removable:
	"""
	Allows a scout to be removed from its owner. The delegate returns True
	when the removal happened (an owner may veto it).
	"""

	def __init__(self, on_remove: Optional[Callable[[], Any]] = None):
		self.on_remove = on_remove

	def remove(self) -> bool:
		if self.on_remove is None:
			return False
		return bool(self.on_remove())
