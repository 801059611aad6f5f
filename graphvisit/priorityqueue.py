
'''
A binary min-heap of vertices supporting decrease-key.

``heapq`` cannot locate an entry once it is in the heap, so this keeps
its own array plus an index table ``{vertex: slot}``.  The priorities
themselves live in an external mapping (Dijkstra's distance map), which
the queue writes to on ``push`` and ``decrease_key``.
'''

from graphvisit.distance import DistanceMap

__all__ = [
	'IndexedPriorityQueue',
]

class IndexedPriorityQueue:
	'''
	Minimum-priority queue over vertices.

	>>> q = IndexedPriorityQueue()
	>>> q.push('a', 0.5); q.push('z', 0.7); q.push('c', 0.9)
	>>> q.decrease_key('c', 0.1)
	>>> [q.pop() for _ in range(len(q))]
	['c', 'a', 'z']
	'''
	def __init__(self, priorities=None):
		if priorities is None:
			priorities = DistanceMap()
		self.priorities = priorities

		self._heap = []
		self._index = {}

	def __len__(self):
		return len(self._heap)

	def __bool__(self):
		return len(self._heap) > 0

	def __contains__(self, v):
		return v in self._index

	def priority(self, v):
		if v not in self._index:
			raise KeyError(v)
		return self.priorities[v]

	def peek(self):
		if not self._heap:
			raise IndexError('peek at empty priority queue')
		return self._heap[0]

	def push(self, v, priority):
		''' Add ``v`` with the given priority.  ``v`` must not already be queued. '''
		if v in self._index:
			raise ValueError('vertex {!r} is already in the priority queue'.format(v))

		self.priorities[v] = priority
		self._index[v] = len(self._heap)
		self._heap.append(v)
		self._sift_up(len(self._heap) - 1)

	def pop(self):
		''' Remove and return the vertex of smallest priority. '''
		if not self._heap:
			raise IndexError('pop from empty priority queue')

		last = len(self._heap) - 1
		self._swap(0, last)
		v = self._heap.pop()
		del self._index[v]

		if self._heap:
			self._sift_down(0)
		return v

	def decrease_key(self, v, priority):
		''' Lower the priority of a queued vertex and restore heap order. '''
		i = self._index[v]  # KeyError if not queued
		if priority > self.priorities[v]:
			raise ValueError('cannot increase priority of {!r} from {} to {}'.format(
				v, self.priorities[v], priority))

		self.priorities[v] = priority
		self._sift_up(i)

	#-----------------------------------------------------

	def _less(self, i, j):
		return self.priorities[self._heap[i]] < self.priorities[self._heap[j]]

	# the index table must change together with the array
	def _swap(self, i, j):
		heap = self._heap
		heap[i], heap[j] = heap[j], heap[i]
		self._index[heap[i]] = i
		self._index[heap[j]] = j

	def _sift_up(self, i):
		while i > 0:
			parent = (i - 1) // 2
			if not self._less(i, parent):
				break
			self._swap(i, parent)
			i = parent

	def _sift_down(self, i):
		n = len(self._heap)
		while True:
			smallest = i
			for child in (2*i + 1, 2*i + 2):
				if child < n and self._less(child, smallest):
					smallest = child
			if smallest == i:
				return
			self._swap(i, smallest)
			i = smallest
