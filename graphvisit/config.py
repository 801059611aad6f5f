
import toml

__all__ = [
	'Config',
]

class Config:
	'''
	The visit TOML "config file".  Holds the parameters of a visit which are
	not part of the graph file itself:

	.. code-block:: toml

	    [general]
	    source = "A"
	    target = "E"            # optional
	    weight = "weight"       # edge attribute read by dijkstra
	    sort_neighbors = false  # visit successors in sorted order

	Anything left out takes its default.
	'''
	DEFAULT_WEIGHT = 'weight'

	def __init__(self, source=None, target=None, weight=None, sort_neighbors=False):
		self.__source = source
		self.__target = target
		self.__weight = weight if weight is not None else self.DEFAULT_WEIGHT
		self.__sort = bool(sort_neighbors)

	def set_source(self, v):         self.__source = v
	def set_target(self, v):         self.__target = v
	def set_weight(self, attr):      self.__weight = attr
	def set_sort_neighbors(self, b): self.__sort = bool(b)

	def get_source(self):         return self.__source
	def get_target(self):         return self.__target
	def get_weight(self):         return self.__weight
	def get_sort_neighbors(self): return self.__sort

	def __eq__(self, other):
		if not isinstance(other, Config):
			return NotImplemented
		return self.serialize() == other.serialize()

	@classmethod
	def from_file(cls, path):
		with open(path) as f:
			s = f.read()
		return cls.deserialize(s)

	def save(self, path):
		s = self.serialize()
		with open(path, 'w') as f:
			f.write(s)

	@classmethod
	def deserialize(cls, s):
		d = toml.loads(s)
		general = d.get('general', {})

		unknown = set(general) - {'source', 'target', 'weight', 'sort_neighbors'}
		if unknown:
			raise KeyError('unknown config keys: {}'.format(', '.join(sorted(unknown))))

		return cls(
			source=general.get('source'),
			target=general.get('target'),
			weight=general.get('weight'),
			sort_neighbors=general.get('sort_neighbors', False),
		)

	def serialize(self):
		# TOML has no null, so unset values are simply left out
		general = {
			'weight': self.__weight,
			'sort_neighbors': self.__sort,
		}
		if self.__source is not None: general['source'] = self.__source
		if self.__target is not None: general['target'] = self.__target

		return toml.dumps({'general': general})
