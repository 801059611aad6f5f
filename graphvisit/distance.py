
import math

__all__ = [
	'DistanceMap',
]

class DistanceMap(dict):
	'''
	A ``{vertex: float}`` mapping of tentative or final distances.

	Unreached vertices are simply absent; looking one up yields ``+inf``
	without inserting it.

	>>> d = DistanceMap({'a': 0.0})
	>>> d['a'], d['b']
	(0.0, inf)
	>>> 'b' in d
	False
	'''
	def __missing__(self, v):
		return math.inf
