#!/usr/bin/env python3

# graphvisit -- visit.py
# Runs one of the visits on a graph file and prints what it found as JSON.

DESC = '''
Visit a graph saved in the networkx parallel-list JSON format.

Algorithms:
  bfs       hop distances and bfs tree from --source (stops early given --target)
  dfs       discover/finish order; from --source, or the whole graph if omitted
  dijkstra  weighted distances from --source (distance and path given --target)
  toposort  topological order of a directed acyclic graph

Options not given on the command line are read from BASENAME.visit.toml
(or --config) when present.
'''

import os
import sys
import json
import math
import argparse

import graphvisit as gv
import graphvisit.filetypes.internal as fileio
from graphvisit.config import Config
from graphvisit.util.log import set_verbosity, notice, warn, die

ALGORITHMS = ['bfs', 'dfs', 'dijkstra', 'toposort']

def main(prog=None, *argv):
	# (support no-arg invocation for setup.py)
	if prog is None:
		return main(*sys.argv)
	prog = os.path.split(prog)[1]

	parser = argparse.ArgumentParser(prog, description=DESC,
		formatter_class=argparse.RawDescriptionHelpFormatter,
	)
	parser.add_argument('algorithm', choices=ALGORITHMS, help='visit to run')
	parser.add_argument('input', type=str, help='graph file (networkx parallel-list JSON)')
	parser.add_argument('--config', '-c', type=str, default=None, help='Path to visit config TOML. '
		'Default is derived from the graph (BASENAME.visit.toml)')
	parser.add_argument('--source', '-s', type=str, default=None, help='source vertex')
	parser.add_argument('--target', '-t', type=str, default=None, help='target vertex')
	parser.add_argument('--weight', '-w', type=nonempty_str, default=None, help='edge attribute holding weights')
	parser.add_argument('--sort', dest='sort_neighbors', action='store_true', default=None,
		help='visit successors in sorted order')
	parser.add_argument('--output', '-o', type=str, default=None, help='output file. Default is stdout.')
	parser.add_argument('--verbose', '-v', action='store_true')

	args = parser.parse_args(argv)
	set_verbosity(args.verbose)

	g = try_read(args.input, fileio.graph.read_networkx)
	config = load_config(args)

	graph = gv.NetworkxGraph(g, weight=config.get_weight(), sort=config.get_sort_neighbors())

	source = resolve_vertex(g, config.get_source(), 'source')
	target = resolve_vertex(g, config.get_target(), 'target')

	if args.algorithm in ('bfs', 'dijkstra') and source is None:
		parser.error('{} needs a source vertex'.format(args.algorithm))
	if args.algorithm == 'toposort':
		if not g.is_directed():
			die('toposort needs a directed graph')
		if source is not None or target is not None:
			warn('source/target are ignored by toposort')
	if args.algorithm == 'dfs' and target is not None:
		warn('target is ignored by dfs')

	result = RUNNERS[args.algorithm](graph, source, target)

	if args.output is None:
		json.dump(result, sys.stdout, indent=1)
		print()
	else:
		with open(args.output, 'w') as f:
			json.dump(result, f, indent=1)
		if args.verbose:
			notice('wrote %s', args.output)

#--------------------------------------------------------

def run_bfs(graph, source, target):
	order = []
	dist = gv.HopDistanceRecorder()
	pred = gv.PredecessorRecorder()

	def discover_vertex(g, v):
		order.append(v)
		dist.discover_vertex(g, v)
	def tree_edge(g, s, t):
		dist.tree_edge(g, s, t)
		pred.tree_edge(g, s, t)

	vis = gv.make_bfs_visitor(discover_vertex=discover_vertex, tree_edge=tree_edge)
	result = {}
	if target is None:
		gv.breadth_first_visit(graph, source, vis)
	elif target == source:
		order.append(source)
		dist.distance[source] = 0
		result['found'] = True
	else:
		result['found'] = gv.breadth_first_visit_to(graph, source, target, vis)

	result.update({
		'order': order,
		'distance': dist.distance,
		'parent': pred.predecessor,
	})
	return result

def run_dfs(graph, source, target):
	discovered, finished = [], []
	callbacks = {
		'discover_vertex': lambda g, v: discovered.append(v),
		'finish_vertex':   lambda g, v: finished.append(v),
	}
	if source is None:
		gv.depth_first_visit(graph, **callbacks)
	else:
		gv.depth_first_visit_from(graph, source, **callbacks)
	return {'discover': discovered, 'finish': finished}

def run_dijkstra(graph, source, target):
	if target is None:
		dist = gv.dijkstra(graph, source)
		return {'distance': dict(dist)}

	distance, path = gv.shortest_path(graph, source, target)
	return {
		'distance': None if distance == math.inf else distance,
		'path': path,
	}

def run_toposort(graph, source, target):
	try:
		order = gv.topological_sort(graph)
	except ValueError as e:
		die('%s', e)
	return {'order': order}

RUNNERS = {
	'bfs': run_bfs,
	'dfs': run_dfs,
	'dijkstra': run_dijkstra,
	'toposort': run_toposort,
}

#--------------------------------------------------------

def load_config(args):
	path = args.config
	if path is None:
		default = os.path.splitext(args.input)[0] + '.visit.toml'
		if os.path.exists(default):
			path = default

	config = Config() if path is None else try_read(path, Config.from_file)

	# command line takes precedence
	if args.source is not None: config.set_source(args.source)
	if args.target is not None: config.set_target(args.target)
	if args.weight is not None: config.set_weight(args.weight)
	if args.sort_neighbors is not None: config.set_sort_neighbors(args.sort_neighbors)
	return config

# Vertices come in as strings, but a graph file may use integer nodes.
def resolve_vertex(g, s, name):
	if s is None or s in g:
		return s
	try:
		i = int(s)
	except (TypeError, ValueError):
		i = None
	if i is not None and i in g:
		return i
	die('%s vertex %r is not in the graph', name, s)

def try_read(path, readfunc):
	try:
		result = readfunc(path)
	except (IOError, OSError) as e: die('Cannot read %s: %s', path, e)
	except (ValueError, KeyError, RuntimeError) as e: die('Error parsing %s: %s', path, e)
	return result

def validating_conversion(basetype, pred, failmsg):
	def func(s):
		error = argparse.ArgumentTypeError(repr(s) + failmsg)
		# this is only intended for simple validation on simple types;
		# in such cases, little value is lost by substituting all exceptions
		#  with one that just names the requirements
		try: x = basetype(s)
		except Exception: raise error
		if not pred(x): raise error
		return x
	return func

nonempty_str = validating_conversion(str, lambda x: len(x) > 0, ' is not a nonempty string')

if __name__ == '__main__':
	main()
