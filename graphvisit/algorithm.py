
'''
Algorithms built on top of the visits, purely through visitors.
'''

import math

from graphvisit.color import ColorMap, WHITE
from graphvisit.traversal import breadth_first_visit, depth_first_visit
from graphvisit.dijkstra import dijkstra_to
from graphvisit.visitors import HopDistanceRecorder, PredecessorRecorder, FinishOrderRecorder

__all__ = [
	'bfs_distances',
	'bfs_predecessors',
	'spanning_forest',
	'topological_sort',
	'has_cycle',
	'shortest_path',
]

def bfs_distances(g, source):
	''' Number of edges on a shortest path from ``source`` to each reachable vertex. '''
	vis = HopDistanceRecorder()
	breadth_first_visit(g, source, vis)
	return vis.distance

def bfs_predecessors(g, source):
	''' The breadth-first tree from ``source``, as a dict of ``{v: parent}``.

	The root is omitted from the dict. '''
	vis = PredecessorRecorder()
	breadth_first_visit(g, source, vis)
	return vis.predecessor

def spanning_forest(g):
	''' Returns a breadth-first spanning forest as a dict of ``{v: parent}``.

	Trees are rooted at vertices in the order of ``g.vertices()``.  The root
	of each tree is omitted from the dict. '''
	parents = {}

	def handle_tree_edge(g, source, target):
		parents[target] = source

	# sharing the color map keeps later trees out of earlier ones
	colors = ColorMap()
	for v in g.vertices():
		if colors[v] == WHITE:
			breadth_first_visit(g, v, colors=colors, tree_edge=handle_tree_edge)

	return parents

def topological_sort(g):
	'''
	Order the vertices of a directed acyclic graph so every edge points forward.

	Raises ``ValueError`` if the graph has a cycle.
	'''
	vis = FinishOrderRecorder()
	depth_first_visit(g, vis)

	if vis.back_edges:
		s, t = vis.back_edges[0]
		raise ValueError('graph has a cycle (through edge {!r} -> {!r})'.format(s, t))

	return vis.order[::-1]

def has_cycle(g):
	''' Whether a directed graph has a cycle (self-loops included).

	Not meaningful for undirected graphs, where every edge is seen
	again backwards. '''
	vis = FinishOrderRecorder()
	depth_first_visit(g, vis)
	return len(vis.back_edges) > 0

def shortest_path(g, source, target):
	'''
	Find a minimum-weight path between two vertices.

	Returns ``(distance, path)``, where ``path`` is a list of vertices from
	``source`` to ``target``.  If ``target`` cannot be reached, returns
	``(inf, [])``.
	'''
	vis = PredecessorRecorder()
	distance = dijkstra_to(g, source, target, vis)
	if distance == math.inf:
		return (math.inf, [])

	return (distance, vis.path_to(target))
