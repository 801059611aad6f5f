
'''
Single-source shortest paths on graphs with non-negative edge weights.

The graph ``g`` needs ``g.next_vertices(v)`` and ``g.weight(source, target)``.
Both directed and undirected graphs work.

NOTE: weights are not checked.  A negative weight does not raise; it
silently produces wrong distances.
'''

from graphvisit.color import ColorMap, WHITE, GRAY, BLACK
from graphvisit.distance import DistanceMap
from graphvisit.priorityqueue import IndexedPriorityQueue
from graphvisit.visitors import DijkstraVisitor, visitor_from_visitor_args
from graphvisit.util.log import getLogger

__all__ = [
	'dijkstra',
	'dijkstra_to',
]

log = getLogger(__name__)

def dijkstra(g, source, visitor=None, **callbacks):
	'''
	Compute the distance from ``source`` to every reachable vertex.

	Returns a ``DistanceMap``.  Vertices that cannot be reached are not in it
	(looking them up gives ``inf``).

	The engine does not build the shortest-path tree itself; use a visitor
	that records ``edge_relaxed`` events (e.g. ``PredecessorRecorder``).
	If all weights are equal to one, ``breadth_first_visit`` is cheaper.
	'''
	visitor = visitor_from_visitor_args(DijkstraVisitor, visitor, callbacks)
	return _dijkstra_impl(g, source, visitor, target=None)

def dijkstra_to(g, source, target, visitor=None, **callbacks):
	'''
	Compute the distance from ``source`` to ``target``, stopping as soon as
	``target`` is popped from the queue.

	Returns ``inf`` if the target cannot be reached.  Anything the visitor
	recorded is final up to and including ``target``.
	'''
	visitor = visitor_from_visitor_args(DijkstraVisitor, visitor, callbacks)
	dist = _dijkstra_impl(g, source, visitor, target=target, look_for_target=True)
	return dist[target]

def _dijkstra_impl(g, source, visitor, target, look_for_target=False):
	colors = ColorMap()
	dist = DistanceMap()
	queue = IndexedPriorityQueue(dist)

	log.debug('dijkstra from %r', source)

	# distance from source to itself is zero
	queue.push(source, 0.0)
	colors[source] = GRAY
	visitor.discover_vertex(g, source)

	settled = 0
	while queue:
		v = queue.pop()
		visitor.examine_vertex(g, v)

		if look_for_target and v == target:
			log.debug('dijkstra reached %r after settling %d vertices', target, settled)
			return dist

		dv = dist[v]
		for nextv in g.next_vertices(v):
			visitor.examine_edge(g, v, nextv)

			# A popped target (BLACK, or v itself on a self-loop) can only compare
			#  lower here if weights are negative; its distance is final and is
			#  left alone either way.
			tentative = dv + g.weight(v, nextv)
			if tentative < dist[nextv]:
				visitor.edge_relaxed(g, v, nextv)

				color = colors[nextv]
				if color == WHITE:
					visitor.discover_vertex(g, nextv)
					queue.push(nextv, tentative)
					colors[nextv] = GRAY
				elif color == GRAY and nextv in queue:
					queue.decrease_key(nextv, tentative)
			else:
				visitor.edge_not_relaxed(g, v, nextv)

		visitor.finish_vertex(g, v)
		colors[v] = BLACK
		settled += 1

	log.debug('dijkstra settled %d vertices', settled)
	return dist
