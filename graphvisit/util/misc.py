
import itertools

__all__ = [
	'window2',
	'zip_matching_length',
	'edictget',
]

def window2(it):
	'''
	Get (overlapping) adjacent pairs from an iterable.

	Handy for turning a vertex path into its edges.

	>>> list(window2(['a','b','d','e']))
	[('a', 'b'), ('b', 'd'), ('d', 'e')]
	>>> list(window2(['a'])) # no "pairs"
	[]
	>>> list(window2([]))  # likewise
	[]
	'''
	it = iter(it) # allow next() to consume elements

	try: prev = next(it)
	except StopIteration:  # 0-length list
		return

	for x in it:
		yield (prev,x)
		prev = x

def zip_matching_length(*arrs):
	'''
	Variant of ``zip`` which raises an error on iterators of inconsistent length.

	>>> list(zip_matching_length([1,2,3], [4,5,6]))
	[(1, 4), (2, 5), (3, 6)]
	>>> list(zip_matching_length([1,2,3], [4,5]))
	Traceback (most recent call last):
	  ...
	ValueError: zip_matching_length called on iterables of mismatched length
	>>> # edge cases
	>>> list(zip_matching_length([],[],[]))
	[]
	>>> list(zip_matching_length())
	[]
	'''
	sentinel = object()
	zipped = list(map(tuple, itertools.zip_longest(*arrs, fillvalue=sentinel)))

	# all arrays were length 0
	if len(zipped) == 0:
		return []

	if sentinel in zipped[-1]:
		raise ValueError('zip_matching_length called on iterables of mismatched length')
	return zipped

def edictget(d, e):
	'''
	Index a dict which takes undirected graph edges as keys.

	The dict is assumed to only store 1 value for each edge. (behavior is undefined on a dict
	which has different values for e.g. `(1,2)` and `(2,1)`).

	>>> d = {(1,4):'a'}
	>>> edictget(d, (1,4))
	'a'
	>>> edictget(d, (4,1))
	'a'
	>>> edictget(d, (4,2))
	Traceback (most recent call last):
	  ...
	KeyError: (4, 2)
	'''
	return d[e[::-1] if e[::-1] in d else e]

if __name__ == '__main__':
	import doctest
	doctest.testmod()
