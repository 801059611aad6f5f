
'''
Graph capabilities consumed by the visits, and read-only adapters that
provide them for common graph representations.

The visits only ever call three methods, and any object providing the ones
an algorithm needs will do; the abstract classes here just document them.
'''

import math
from abc import ABCMeta, abstractmethod

import numpy as np
from scipy import sparse

from graphvisit.util import edictget

__all__ = [
	'ForwardGraph',
	'WeightedGraph',
	'VertexListGraph',
	'AdjacencyDict',
	'NetworkxGraph',
	'SparseMatrixGraph',
]

class ForwardGraph(metaclass=ABCMeta):
	''' A graph that can be navigated forward.  Directed or undirected. '''
	@abstractmethod
	def next_vertices(self, v):
		''' Vertices reachable by leaving ``v`` along one edge.

		For reproducible visits, the order should be stable. '''
		pass

class WeightedGraph(ForwardGraph):
	''' Needed by dijkstra. '''
	@abstractmethod
	def weight(self, source, target):
		''' Non-negative weight of the edge ``source -> target``. '''
		pass

class VertexListGraph(ForwardGraph):
	''' Needed to depth-first visit a whole graph. '''
	@abstractmethod
	def vertices(self):
		''' All vertices.  The order decides where new dfs trees are rooted. '''
		pass

#--------------------------------------------------------

class AdjacencyDict(WeightedGraph, VertexListGraph):
	'''
	Adapts a ``{vertex: [successors]}`` dict.

	Vertices absent from the dict have no successors.  ``weights`` is an
	optional ``{(source, target): weight}`` dict; edges absent from it weigh
	``default_weight``.  With ``undirected=True`` a weight stored under
	``(t, s)`` also serves ``(s, t)``.  (the successor lists must still name
	both directions)

	>>> g = AdjacencyDict({'a': ['b', 'c'], 'b': ['d']})
	>>> list(g.vertices())
	['a', 'b', 'c', 'd']
	>>> g.next_vertices('d')
	[]
	'''
	def __init__(self, adj, weights=None, undirected=False, default_weight=1.0):
		self._adj = adj
		self._weights = dict(weights or {})
		self._undirected = undirected
		self._default_weight = default_weight

	def next_vertices(self, v):
		return self._adj.get(v, [])

	def weight(self, source, target):
		try:
			if self._undirected:
				return edictget(self._weights, (source, target))
			return self._weights[source, target]
		except KeyError:
			return self._default_weight

	def vertices(self):
		# keys first, then vertices that only ever appear as successors
		seen = dict.fromkeys(self._adj)
		for succ in self._adj.values():
			seen.update(dict.fromkeys(succ))
		return iter(seen)

class NetworkxGraph(WeightedGraph, VertexListGraph):
	'''
	Adapts a ``networkx`` ``Graph`` or ``DiGraph``.

	Edge weights are read from the edge attribute ``weight``; edges without it
	weigh ``default_weight``.  ``sort=True`` sorts successors and vertices
	(requires orderable vertices), which makes visits independent of the
	order in which the graph was built.
	'''
	def __init__(self, g, weight='weight', default_weight=1.0, sort=False):
		if g.is_multigraph():
			raise ValueError('Multigraphs not supported.')
		self.g = g
		self._attr = weight
		self._default_weight = default_weight
		self._sort = sort

	def next_vertices(self, v):
		if self.g.is_directed():
			succ = self.g.successors(v)
		else:
			succ = self.g.neighbors(v)
		return sorted(succ) if self._sort else list(succ)

	def weight(self, source, target):
		return self.g.edges[source, target].get(self._attr, self._default_weight)

	def vertices(self):
		return sorted(self.g.nodes) if self._sort else list(self.g.nodes)

class SparseMatrixGraph(WeightedGraph, VertexListGraph):
	'''
	Adapts a ``scipy.sparse`` adjacency matrix.

	Vertices are the integers ``0..n-1``; every stored entry ``(i, j)`` is an
	edge ``i -> j`` weighted by its value.  Explicitly stored zeros are
	zero-weight edges (as in ``scipy.sparse.csgraph``).  For an undirected
	graph, store both ``(i, j)`` and ``(j, i)``.

	>>> import numpy as np
	>>> g = SparseMatrixGraph(np.array([[0, 2.], [0, 0]]))
	>>> g.next_vertices(0), g.weight(0, 1)
	([1], 2.0)
	'''
	def __init__(self, matrix):
		matrix = sparse.csr_matrix(matrix, copy=True)
		if matrix.shape[0] != matrix.shape[1]:
			raise ValueError('adjacency matrix must be square, got shape {}'.format(matrix.shape))
		matrix.sort_indices()
		self.matrix = matrix

	def __len__(self):
		return self.matrix.shape[0]

	def next_vertices(self, v):
		m = self.matrix
		return [int(j) for j in m.indices[m.indptr[v]:m.indptr[v+1]]]

	def weight(self, source, target):
		m = self.matrix
		start, end = m.indptr[source], m.indptr[source+1]
		# column indices of a row are sorted (see __init__)
		k = start + np.searchsorted(m.indices[start:end], target)
		if k < end and m.indices[k] == target:
			return float(m.data[k])
		return math.inf

	def vertices(self):
		return range(self.matrix.shape[0])
