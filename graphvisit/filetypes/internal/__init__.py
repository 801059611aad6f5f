
from . import graph
