"""
Simplest possible environment concept.

One flat namespace per session. Assignment creates or overwrites;
nothing is ever removed; it lives exactly as long as its session.
"""
from typing import Iterator, Optional
from .errors import UndefinedVariable
from .primitive import VALUE

class Environment:
	def __init__(self):
		self._bindings:dict[str, VALUE] = {}

	def holds(self, name:str) -> bool: return name in self._bindings

	def resolve(self, name:str, span:Optional[slice]=None) -> VALUE:
		try: return self._bindings[name]
		except KeyError: raise UndefinedVariable(name, span) from None

	def assign(self, name:str, value:VALUE) -> VALUE:
		assert name, "Assignment needs a name."
		self._bindings[name] = value
		return value

	def __iter__(self) -> Iterator[str]:
		""" The bound names, in the order they were first assigned """
		return iter(self._bindings)
	def __len__(self): return len(self._bindings)
