
'''
Visitors observe a traversal through event callbacks.

Every method of ``BfsVisitor``, ``DfsVisitor`` and ``DijkstraVisitor`` is a
no-op, so a visitor only needs to define the events it cares about.  The
engines also accept the events as keyword callbacks, e.g.

    breadth_first_visit(g, 'a', tree_edge=lambda g,s,t: parent.__setitem__(t, s))

Edge events receive the edge as two arguments, ``(source, target)``.
'''

__all__ = [
	'BfsVisitor',
	'DfsVisitor',
	'DijkstraVisitor',
	'make_bfs_visitor',
	'make_dfs_visitor',
	'make_dijkstra_visitor',
	'visitor_from_visitor_args',
	'HopDistanceRecorder',
	'PredecessorRecorder',
	'FinishOrderRecorder',
]

class BfsVisitor:
	def discover_vertex(self, g, v):
		''' Invoked when a vertex is first found (source, or target of a tree edge). '''
		pass

	def examine_vertex(self, g, v):
		''' Invoked on a vertex when popped from the queue. '''
		pass

	def examine_edge(self, g, source, target):
		''' Invoked on all out-edges of a vertex. '''
		pass

	def tree_edge(self, g, source, target):
		''' Invoked when an edge leads to an undiscovered vertex. '''
		pass

	def non_tree_edge(self, g, source, target):
		''' Invoked when an edge leads to an already discovered vertex. '''
		pass

	def gray_target(self, g, source, target):
		''' Invoked after ``non_tree_edge`` when the target is still in the queue. '''
		pass

	def black_target(self, g, source, target):
		''' Invoked after ``non_tree_edge`` when the target is already finished. '''
		pass

	def finish_vertex(self, g, v):
		''' Invoked after all edges of a vertex have been examined. '''
		pass

class DfsVisitor:
	def initialize_vertex(self, g, v):
		''' Invoked on every vertex before a whole-graph visit starts. '''
		pass

	def discover_vertex(self, g, v):
		''' Invoked on the root of a dfs tree and on the target of a tree edge. '''
		pass

	def examine_edge(self, g, source, target):
		''' Invoked on all out-edges of a vertex. '''
		pass

	def tree_edge(self, g, source, target):
		''' Invoked when an edge leads to an undiscovered vertex. '''
		pass

	def back_edge(self, g, source, target):
		''' Invoked when an edge leads to a vertex that is discovered but unfinished.

		On undirected graphs, this WILL be invoked on each tree edge when it is
		examined backwards from the child. '''
		pass

	def forward_or_cross_edge(self, g, source, target):
		''' Invoked when an edge leads to a finished vertex.

		Never happens on undirected graphs. '''
		pass

	def finish_vertex(self, g, v):
		''' Invoked after all edges of a vertex have been examined and all
		of its tree children are finished. '''
		pass

class DijkstraVisitor:
	def discover_vertex(self, g, v):
		''' Invoked when a vertex is first pushed onto the queue. '''
		pass

	def examine_vertex(self, g, v):
		''' Invoked on a vertex when popped from the queue. Its distance is final. '''
		pass

	def examine_edge(self, g, source, target):
		''' Invoked on all out-edges of a vertex. '''
		pass

	def edge_relaxed(self, g, source, target):
		''' Invoked when the edge gives a strictly shorter path to ``target``. '''
		pass

	def edge_not_relaxed(self, g, source, target):
		''' Invoked when the edge gives no improvement. '''
		pass

	def finish_vertex(self, g, v):
		''' Invoked after all edges of a vertex have been examined. '''
		pass

# Makes a visitor, overriding its member methods with functions provided by cb_dict.
def _make_visitor(cls, cb_dict):
	obj = cls()
	for k,v in cb_dict.items():
		if k not in cls.__dict__:
			raise KeyError('cannot override method {}; no such method'.format(k))
		obj.__dict__[k] = v
	return obj

def make_bfs_visitor(**kwargs):
	return _make_visitor(BfsVisitor, kwargs)

def make_dfs_visitor(**kwargs):
	return _make_visitor(DfsVisitor, kwargs)

def make_dijkstra_visitor(**kwargs):
	return _make_visitor(DijkstraVisitor, kwargs)

# Handles the visitor and **callbacks arguments, either by returning the visitor,
#  or by constructing one from the callbacks.
def visitor_from_visitor_args(cls, visitor, callbacks):
	if visitor is None:
		visitor = _make_visitor(cls, callbacks)
	elif len(callbacks) > 0:
		raise RuntimeError('Received both a visitor and callbacks!')

	return visitor

#--------------------------------------------------------
# Visitors which record something useful.

class HopDistanceRecorder(BfsVisitor):
	'''
	Records the number of edges between the source and each discovered vertex.

	Vertices that are not reached are absent from ``distance``.
	'''
	def __init__(self):
		self.distance = {}

	def discover_vertex(self, g, v):
		# only the source is discovered without a tree edge first
		self.distance.setdefault(v, 0)

	def tree_edge(self, g, source, target):
		self.distance[target] = self.distance[source] + 1

class PredecessorRecorder(DijkstraVisitor, BfsVisitor):
	'''
	Records the parent of each vertex in the search tree.

	Works with both Dijkstra (where a vertex's parent is replaced each time an
	edge to it is relaxed) and breadth-first visits (via tree edges).

	One recorder may observe several visits (e.g. one per tree of a forest,
	sharing a color map).  Every vertex discovered without an edge leading to
	it is a root, and ``path_to`` walks back to whichever root it hangs from.
	Later visits overwrite the parents of vertices they reach again.
	'''
	def __init__(self):
		self.predecessor = {}
		self.roots = set()
		self._incoming = None

	def discover_vertex(self, g, v):
		if self._incoming == v:
			# reached through an edge; no longer the root of an earlier visit
			self.roots.discard(v)
		else:
			self.predecessor.pop(v, None)
			self.roots.add(v)
		self._incoming = None

	def edge_relaxed(self, g, source, target):
		self.predecessor[target] = source
		self._incoming = target

	def tree_edge(self, g, source, target):
		self.predecessor[target] = source
		self._incoming = target

	def finish_vertex(self, g, v):
		self._incoming = None

	def path_to(self, target):
		''' Vertices from a root to ``target``, or ``[]`` if it was not reached. '''
		if target not in self.roots and target not in self.predecessor:
			return []

		path = [target]
		while path[-1] not in self.roots:
			path.append(self.predecessor[path[-1]])
		path.reverse()
		return path

class FinishOrderRecorder(DfsVisitor):
	'''
	Records vertices in the order they are finished.

	For a DAG, ``reversed(order)`` is a topological order.  Any back edge
	(i.e. a directed cycle) is counted in ``back_edges``.
	'''
	def __init__(self):
		self.order = []
		self.back_edges = []

	def back_edge(self, g, source, target):
		self.back_edges.append((source, target))

	def finish_vertex(self, g, v):
		self.order.append(v)
