
'''
Breadth-first and depth-first visits.

The graph ``g`` only needs ``g.next_vertices(v)`` (and ``g.vertices()`` for
``depth_first_visit``).  Edges are visited in the order ``next_vertices``
returns them, so a graph with a stable order gives a reproducible visit.

All functions take either a ``visitor`` or keyword callbacks named after the
visitor's methods; see ``graphvisit.visitors``.
'''

from collections import deque

from graphvisit.color import ColorMap, WHITE, GRAY, BLACK
from graphvisit.visitors import BfsVisitor, DfsVisitor, visitor_from_visitor_args
from graphvisit.util.log import getLogger

__all__ = [
	'breadth_first_visit',
	'breadth_first_visit_to',
	'depth_first_visit_from',
	'depth_first_visit',
]

log = getLogger(__name__)

def breadth_first_visit(g, source, visitor=None, colors=None, **callbacks):
	'''
	Visit the vertices reachable from ``source``, closest (in hops) first.

	``colors`` may be given to share marks between several visits; vertices
	already BLACK in it are never visited (if ``source`` is one of them,
	nothing happens).  Returns the color map.
	'''
	visitor = visitor_from_visitor_args(BfsVisitor, visitor, callbacks)
	if colors is None:
		colors = ColorMap()

	log.debug('breadth-first visit from %r', source)
	_bfs_impl(g, source, visitor, colors, target=None)
	return colors

def breadth_first_visit_to(g, source, target, visitor=None, colors=None, **callbacks):
	'''
	Like ``breadth_first_visit``, but stop as soon as ``target`` is discovered.

	Returns ``True`` if the target was found.  The vertex whose edge led to the
	target is left unfinished.  ``source`` itself is never compared against
	``target``; handle ``source == target`` before calling this.
	'''
	visitor = visitor_from_visitor_args(BfsVisitor, visitor, callbacks)
	if colors is None:
		colors = ColorMap()

	log.debug('breadth-first visit from %r to %r', source, target)
	return _bfs_impl(g, source, visitor, colors, target=target, look_for_target=True)

def _bfs_impl(g, source, visitor, colors, target, look_for_target=False):
	# an already discovered source is outside of this visit
	if colors[source] != WHITE:
		return False

	queue = deque()

	colors[source] = GRAY
	visitor.discover_vertex(g, source)
	queue.append(source)

	while queue:
		v = queue.popleft()
		visitor.examine_vertex(g, v)

		for nextv in g.next_vertices(v):
			visitor.examine_edge(g, v, nextv)

			color = colors[nextv]
			if color == WHITE:
				visitor.tree_edge(g, v, nextv)
				visitor.discover_vertex(g, nextv)
				colors[nextv] = GRAY
				queue.append(nextv)

				if look_for_target and nextv == target:
					return True

			else:
				visitor.non_tree_edge(g, v, nextv)
				if color == GRAY:
					visitor.gray_target(g, v, nextv)
				else:
					visitor.black_target(g, v, nextv)

		visitor.finish_vertex(g, v)
		colors[v] = BLACK

	return False

#--------------------------------------------------------

def depth_first_visit_from(g, source, visitor=None, colors=None, recursive=False, **callbacks):
	'''
	Build one depth-first tree rooted at ``source``.

	By default the visit runs on an explicit stack, so the depth of the graph
	is not limited by Python's recursion limit.  ``recursive=True`` uses true
	recursion instead; both produce exactly the same events.

	If ``colors`` already marks ``source`` as discovered, no events are
	emitted.  Returns the color map.
	'''
	visitor = visitor_from_visitor_args(DfsVisitor, visitor, callbacks)
	if colors is None:
		colors = ColorMap()

	log.debug('depth-first visit from %r', source)
	if colors[source] == WHITE:
		_dfs_impl(recursive)(g, source, visitor, colors)
	return colors

def depth_first_visit(g, visitor=None, recursive=False, **callbacks):
	'''
	Build a depth-first forest covering every vertex in ``g.vertices()``.

	``initialize_vertex`` is invoked on every vertex first.  Trees are then
	rooted at each still-undiscovered vertex, in the order ``g.vertices()``
	lists them.  Returns the color map (every vertex BLACK).
	'''
	visitor = visitor_from_visitor_args(DfsVisitor, visitor, callbacks)

	vertices = list(g.vertices())
	for v in vertices:
		visitor.initialize_vertex(g, v)

	log.debug('depth-first visit of %d vertices', len(vertices))
	visit = _dfs_impl(recursive)
	colors = ColorMap()
	for v in vertices:
		if colors[v] == WHITE:
			visit(g, v, visitor, colors)
	return colors

def _dfs_impl(recursive):
	return _dfs_rooted_recursive if recursive else _dfs_rooted_iterative

def _dfs_rooted_iterative(g, root, visitor, colors):
	# Written in an iterative fashion due to Python's limited support for recursion.
	# Each stack frame is (vertex, iterator over its remaining successors); leaving
	#  the iterator mid-way and resuming it later is what a recursive call does.

	colors[root] = GRAY
	visitor.discover_vertex(g, root)
	stack = [(root, iter(g.next_vertices(root)))]

	while len(stack) > 0:
		(v, successors) = stack[-1]

		# Get one edge
		try: nextv = next(successors)

		# No edge found
		except StopIteration:
			visitor.finish_vertex(g, v)
			colors[v] = BLACK

			# Return to previous vertex
			stack.pop()

		# Edge found
		else:
			visitor.examine_edge(g, v, nextv)

			color = colors[nextv]
			if color == WHITE:
				visitor.tree_edge(g, v, nextv)

				# Visit target on next iteration
				colors[nextv] = GRAY
				visitor.discover_vertex(g, nextv)
				stack.append((nextv, iter(g.next_vertices(nextv))))

			elif color == GRAY:
				visitor.back_edge(g, v, nextv)
			else:
				visitor.forward_or_cross_edge(g, v, nextv)

def _dfs_rooted_recursive(g, v, visitor, colors):
	colors[v] = GRAY
	visitor.discover_vertex(g, v)

	for nextv in g.next_vertices(v):
		visitor.examine_edge(g, v, nextv)

		color = colors[nextv]
		if color == WHITE:
			visitor.tree_edge(g, v, nextv)
			_dfs_rooted_recursive(g, nextv, visitor, colors)
		elif color == GRAY:
			visitor.back_edge(g, v, nextv)
		else:
			visitor.forward_or_cross_edge(g, v, nextv)

	visitor.finish_vertex(g, v)
	colors[v] = BLACK
