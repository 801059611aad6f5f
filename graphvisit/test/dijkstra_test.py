
import unittest
import math

import numpy as np
import networkx as nx
from scipy import sparse
from scipy.sparse import csgraph

from graphvisit.dijkstra import dijkstra, dijkstra_to
from graphvisit.traversal import breadth_first_visit
from graphvisit.graphs import AdjacencyDict, NetworkxGraph, SparseMatrixGraph
from graphvisit.visitors import PredecessorRecorder, HopDistanceRecorder
from graphvisit.test.common import EventLog, small_weighted_graph

class ScenarioTests(unittest.TestCase):
	def test_distance_and_path_to_target(self):
		vis = PredecessorRecorder()
		distance = dijkstra_to(small_weighted_graph(), 'A', 'E', vis)
		self.assertAlmostEqual(distance, 0.4)
		self.assertListEqual(vis.path_to('E'), ['A', 'B', 'D', 'E'])

	def test_stops_when_target_popped(self):
		log = EventLog()
		dijkstra_to(small_weighted_graph(), 'A', 'E', log)

		self.assertEqual(log.events[-1], ('examine_vertex', 'E'))
		self.assertListEqual(log.named('examine_vertex'), ['A', 'B', 'D', 'E'])
		self.assertListEqual(log.named('finish_vertex'), ['A', 'B', 'D'])

	def test_full_distances(self):
		dist = dijkstra(small_weighted_graph(), 'A')
		expected = {'A': 0.0, 'B': 0.1, 'C': 0.6, 'D': 0.3, 'E': 0.4}
		self.assertSetEqual(set(dist), set(expected))
		for v in expected:
			self.assertAlmostEqual(dist[v], expected[v])

	def test_event_sequence(self):
		g = AdjacencyDict({'A': ['B', 'C'], 'C': ['B']},
			weights={('A','B'): 5.0, ('A','C'): 1.0, ('C','B'): 1.0})
		log = EventLog()
		dist = dijkstra(g, 'A', log)

		self.assertListEqual(log.events, [
			('discover_vertex', 'A'),
			('examine_vertex', 'A'),
			('examine_edge', 'A', 'B'),
			('edge_relaxed', 'A', 'B'),
			('discover_vertex', 'B'),
			('examine_edge', 'A', 'C'),
			('edge_relaxed', 'A', 'C'),
			('discover_vertex', 'C'),
			('finish_vertex', 'A'),
			('examine_vertex', 'C'),
			('examine_edge', 'C', 'B'),
			('edge_relaxed', 'C', 'B'), # decrease-key; B is not discovered again
			('finish_vertex', 'C'),
			('examine_vertex', 'B'),
			('finish_vertex', 'B'),
		])
		self.assertDictEqual(dict(dist), {'A': 0.0, 'B': 2.0, 'C': 1.0})

	# equal distances do not count as an improvement
	def test_tie_not_relaxed(self):
		g = AdjacencyDict({'A': ['B', 'C'], 'B': ['D'], 'C': ['D']})
		log = EventLog()
		dijkstra(g, 'A', log)
		self.assertListEqual(log.named('edge_relaxed'), [('A','B'), ('A','C'), ('B','D')])
		self.assertListEqual(log.named('edge_not_relaxed'), [('C','D')])

	def test_source_is_target(self):
		log = EventLog()
		self.assertEqual(dijkstra_to(small_weighted_graph(), 'A', 'A', log), 0.0)
		self.assertListEqual(log.events, [
			('discover_vertex', 'A'),
			('examine_vertex', 'A'),
		])

class UnreachableTests(unittest.TestCase):
	def setUp(self):
		self.g = AdjacencyDict({'A': ['B'], 'B': [], 'Z': ['A']})

	def test_absent_from_map(self):
		dist = dijkstra(self.g, 'A')
		self.assertNotIn('Z', dist)
		self.assertEqual(dist['Z'], math.inf)
		self.assertNotIn('Z', dist) # lookup does not insert

	def test_target(self):
		log = EventLog()
		self.assertEqual(dijkstra_to(self.g, 'A', 'Z', log), math.inf)
		self.assertNotIn('Z', log.named('examine_vertex'))

class NegativeWeightTests(unittest.TestCase):
	# a vertex being examined is already out of the queue; its distance stays put
	def test_negative_self_loop(self):
		g = AdjacencyDict({'A': ['A', 'B']}, weights={('A', 'A'): -1.0})
		log = EventLog()
		dist = dijkstra(g, 'A', log)
		self.assertDictEqual(dict(dist), {'A': 0.0, 'B': 1.0})
		self.assertIn(('edge_relaxed', 'A', 'A'), log.events)
		self.assertListEqual(log.named('finish_vertex'), ['A', 'B'])

	def test_negative_edge_to_finished_vertex(self):
		g = AdjacencyDict({'A': ['B'], 'B': ['A']}, weights={('B', 'A'): -5.0})
		dist = dijkstra(g, 'A')
		self.assertDictEqual(dict(dist), {'A': 0.0, 'B': 1.0})

class PropertyTests(unittest.TestCase):
	# with unit weights, dijkstra and bfs agree
	def test_unit_weights_match_bfs(self):
		for seed in range(10):
			nxg = nx.gnp_random_graph(40, 0.08, seed=seed, directed=(seed % 2 == 0))
			g = NetworkxGraph(nxg)

			hops = HopDistanceRecorder()
			breadth_first_visit(g, 0, hops)

			popped = []
			dist = dijkstra(g, 0, examine_vertex=lambda g, v: popped.append(v))

			self.assertDictEqual(dict(dist), {v: float(d) for v,d in hops.distance.items()})
			self.assertListEqual([dist[v] for v in popped], sorted(dist[v] for v in popped))

	def test_matches_networkx(self):
		rng = np.random.RandomState(42)
		for seed in range(10):
			nxg = nx.gnp_random_graph(30, 0.15, seed=seed, directed=True)
			for s, t in nxg.edges():
				nxg.edges[s, t]['length'] = float(rng.rand())

			dist = dijkstra(NetworkxGraph(nxg, weight='length'), 0)
			expected = nx.single_source_dijkstra_path_length(nxg, 0, weight='length')

			self.assertSetEqual(set(dist), set(expected))
			for v in expected:
				self.assertAlmostEqual(dist[v], expected[v])

	def test_matches_csgraph(self):
		for seed in range(10):
			n = 50
			m = sparse.random(n, n, density=0.06, random_state=seed, format='csr')

			dist = dijkstra(SparseMatrixGraph(m), 0)
			ours = np.array([dist[v] for v in range(n)])
			theirs = csgraph.dijkstra(m, directed=True, indices=0)
			np.testing.assert_allclose(ours, theirs)

	# once a vertex has been popped, no edge into it is ever relaxed again
	def test_popped_distances_are_final(self):
		rng = np.random.RandomState(7)
		for seed in range(10):
			nxg = nx.gnp_random_graph(30, 0.2, seed=seed, directed=False)
			for s, t in nxg.edges():
				nxg.edges[s, t]['weight'] = float(rng.randint(1, 5))

			log = EventLog()
			dijkstra(NetworkxGraph(nxg), 0, log)

			done = set()
			for event in log.events:
				if event[0] == 'examine_vertex':
					done.add(event[1])
				elif event[0] == 'edge_relaxed':
					self.assertNotIn(event[2], done)

	# shortest path tree from the predecessors is consistent with the distances
	def test_predecessor_paths(self):
		g = small_weighted_graph()
		vis = PredecessorRecorder()
		dist = dijkstra(g, 'A', vis)
		for v in dist:
			path = vis.path_to(v)
			length = sum(g.weight(s, t) for s, t in zip(path, path[1:]))
			self.assertAlmostEqual(length, dist[v])

if __name__ == '__main__':
	unittest.main()
