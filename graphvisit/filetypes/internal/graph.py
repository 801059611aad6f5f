
'''
The graph files read by the ``graphvisit`` script.

A JSON object holding ``directed``, a ``nodes`` list (ints or strings)
and an ``edges`` list of node pairs.  Edge attributes such as the weight
used by ``dijkstra`` are stored as parallel lists under ``edge_attr``,
one entry per edge, so every edge must carry the same attributes.
'''

import json

import networkx as nx

from graphvisit.util import zip_matching_length

__all__ = [
	'write_networkx',
	'read_networkx',
]

HIGHEST_VERSION = 1

def write_networkx(g, path):
	'''
	Save a networkx ``Graph`` or ``DiGraph`` using parallel list format.
	'''
	if g.is_multigraph():
		raise ValueError('Multigraphs not supported.') # too much hassle to do them right

	_validate_graph_attributes(g)

	nodes = list(g.nodes())
	edges = list(g.edges())
	gattrs = dict(g.graph)

	nattrs = dict()
	if len(nodes) > 0:
		for attr in g.nodes[nodes[0]]:
			d = nx.get_node_attributes(g, attr)
			nattrs[attr] = [d[n] for n in nodes]

	eattrs = dict()
	if len(edges) > 0:
		for attr in g.edges[edges[0]]:
			d = nx.get_edge_attributes(g, attr)
			eattrs[attr] = [d[e] for e in edges]

	d = {
		'formatver':  HIGHEST_VERSION,
		'directed':   g.is_directed(),
		'nodes':      nodes,
		'edges':      [list(e) for e in edges],
		'graph_attr': gattrs,
		'edge_attr':  eattrs,
		'node_attr':  nattrs,
	}
	with open(path, 'w') as f:
		json.dump(d, f)


def read_networkx(path):
	'''
	Read a networkx ``Graph`` or ``DiGraph`` saved in parallel list format.
	'''
	with open(path) as f:
		d = json.load(f)

	if d['formatver'] > HIGHEST_VERSION:
		raise RuntimeError('Unsupported file format version {}'.format(d['formatver']))

	if d['directed']: g = nx.DiGraph()
	else:             g = nx.Graph()

	nodes = list(d['nodes'])
	edges = list(map(tuple, d['edges']))

	if len(nodes) != len(set(nodes)): raise RuntimeError('Duplicate node!')

	g.add_nodes_from(nodes)
	g.add_edges_from(edges)
	if g.number_of_nodes() != len(nodes):
		raise RuntimeError('Edge list mentions nodes missing from the node list!')

	for attr, values in d.get('node_attr', {}).items():
		if len(values) != len(nodes):
			raise RuntimeError('Node attribute {} has incorrect number of elements!'.format(repr(attr)))
		nx.set_node_attributes(g, {n:value for n,value in zip_matching_length(nodes, values)}, attr)

	for attr, values in d.get('edge_attr', {}).items():
		if len(values) != len(edges):
			raise RuntimeError('Edge attribute {} has incorrect number of elements!'.format(repr(attr)))
		nx.set_edge_attributes(g, {e:value for e,value in zip_matching_length(edges, values)}, attr)

	for attr, value in d.get('graph_attr', {}).items():
		g.graph[attr] = value

	assert _validate_graph_attributes(g) # post-condition
	return g


# Verifies that any node/edge attributes in g are completely defined for all nodes/edges.
# Raises an error or returns True (for use in assertions).
def _validate_graph_attributes(g):
	all_node_attributes = set()
	for v in g:
		all_node_attributes.update(g.nodes[v])

	for attr in all_node_attributes:
		if len(nx.get_node_attributes(g, attr)) != g.number_of_nodes():
			raise ValueError('node attribute {} is set on some nodes but not others'.format(repr(attr)))

	all_edge_attributes = set()
	for e in g.edges():
		all_edge_attributes.update(g.edges[e])

	for attr in all_edge_attributes:
		if len(nx.get_edge_attributes(g, attr)) != g.number_of_edges():
			raise ValueError('edge attribute {} is set on some edges but not others'.format(repr(attr)))

	return True
