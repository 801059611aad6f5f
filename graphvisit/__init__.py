
'''
Breadth-first, depth-first and Dijkstra visits over any graph, observed
through visitors.  Inspired by the Boost Graph Library.
'''

from graphvisit.color import *
from graphvisit.distance import *
from graphvisit.priorityqueue import *
from graphvisit.visitors import *
from graphvisit.traversal import *
from graphvisit.dijkstra import *
from graphvisit.graphs import *
from graphvisit.algorithm import *
