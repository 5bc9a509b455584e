"""
Simplest possible environment concept.

One of these lives as long as the session does.
The shell owns it and passes it into each call to `execute`.
"""
from typing import Optional

class Environment:
	def __init__(self):
		self._bindings: dict[str, int] = {}

	def get(self, name:str) -> Optional[int]:
		return self._bindings.get(name)

	def set(self, name:str, value:int):
		assert isinstance(value, int), value
		self._bindings[name] = value

	def __repr__(self): return "<Environment of %d>" % len(self._bindings)
