
from graphvisit.visitors import BfsVisitor, DfsVisitor, DijkstraVisitor
from graphvisit.graphs import AdjacencyDict

# A visitor for any of the visits which logs every event as a tuple,
#  e.g. ('tree_edge', 'A', 'B') or ('finish_vertex', 'B').
class EventLog(BfsVisitor, DfsVisitor, DijkstraVisitor):
	def __init__(self):
		self.events = []

	def named(self, name):
		''' Arguments of all events with the given name. '''
		return [e[1:] if len(e) > 2 else e[1] for e in self.events if e[0] == name]

def _recorder(name):
	def method(self, g, *args):
		self.events.append((name,) + args)
	return method

EVENT_NAMES = set()
for _cls in (BfsVisitor, DfsVisitor, DijkstraVisitor):
	EVENT_NAMES.update(k for k in vars(_cls) if not k.startswith('_'))
for _name in EVENT_NAMES:
	setattr(EventLog, _name, _recorder(_name))

#--------------------------------------------------------
# Small graphs used throughout the tests.

# A -> B -> D
#   \-> C -- \-> E
def small_digraph():
	return AdjacencyDict({
		'A': ['B', 'C'],
		'B': ['D'],
		'C': ['E'],
		'D': ['E'],
	})

# A DAG with a vertex (F) that is not reachable from A.
def small_dag():
	return AdjacencyDict({
		'A': ['B', 'C'],
		'B': ['D', 'E'],
		'C': ['E'],
		'D': ['E'],
		'E': [],
		'F': ['B'],
	})

# A -0.1- B -0.2- D -0.1- E
#   \---0.6--- C ---0.3--/
def small_weighted_graph():
	return AdjacencyDict(
		{
			'A': ['B', 'C'],
			'B': ['A', 'D'],
			'C': ['A', 'E'],
			'D': ['B', 'E'],
			'E': ['C', 'D'],
		},
		weights={
			('A','B'): 0.1,
			('B','D'): 0.2,
			('D','E'): 0.1,
			('A','C'): 0.6,
			('C','E'): 0.3,
		},
		undirected=True,
	)
