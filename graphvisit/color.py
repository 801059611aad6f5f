
'''
Vertex colors used to mark progress during a visit.

 * ``WHITE`` - not discovered yet (the default for any vertex)
 * ``GRAY``  - discovered, but its out-edges are not all processed yet
 * ``BLACK`` - finished

During a single visit a vertex only ever moves forward through
WHITE -> GRAY -> BLACK.
'''

from enum import IntEnum

import numpy as np

__all__ = [
	'Color',
	'WHITE',
	'GRAY',
	'BLACK',
	'ColorMap',
	'DenseColorMap',
]

class Color(IntEnum):
	WHITE = 0
	GRAY  = 1
	BLACK = 2

WHITE = Color.WHITE
GRAY  = Color.GRAY
BLACK = Color.BLACK

class ColorMap(dict):
	'''
	A sparse ``{vertex: Color}`` mapping in which missing vertices are WHITE.

	Looking up a missing vertex does NOT insert it.

	>>> cmap = ColorMap()
	>>> cmap['a']
	<Color.WHITE: 0>
	>>> 'a' in cmap
	False
	>>> cmap['a'] = GRAY
	>>> cmap['a'] is GRAY
	True

	Vertices may be pre-marked BLACK to keep a visit out of some region
	of a graph:

	>>> ColorMap.excluding(['x', 'y'])['y']
	<Color.BLACK: 2>
	'''
	def __missing__(self, v):
		return WHITE

	@classmethod
	def excluding(cls, vertices):
		return cls((v, BLACK) for v in vertices)

	def with_color(self, color):
		''' Vertices explicitly marked with ``color``. '''
		return [v for (v,c) in self.items() if c == color]

class DenseColorMap:
	'''
	Color map backed by a numpy array, for graphs whose vertices are the
	integers ``0..n-1`` (e.g. a ``SparseMatrixGraph``).

	>>> cmap = DenseColorMap(3)
	>>> cmap[2] = BLACK
	>>> [cmap[i] for i in range(3)]
	[<Color.WHITE: 0>, <Color.WHITE: 0>, <Color.BLACK: 2>]
	>>> cmap.with_color(BLACK)
	[2]
	'''
	def __init__(self, n):
		self._arr = np.zeros(n, dtype=np.int8)

	def __getitem__(self, v):
		return Color(int(self._arr[v]))

	def __setitem__(self, v, color):
		self._arr[v] = int(color)

	def __len__(self):
		return len(self._arr)

	def with_color(self, color):
		return [int(i) for i in np.flatnonzero(self._arr == int(color))]

	def counts(self):
		''' Number of vertices of each color, as a ``{Color: int}`` dict. '''
		counts = np.bincount(self._arr, minlength=len(Color))
		return {c: int(counts[c]) for c in Color}
