''' Lists of numbers.

	Each generator works out the next value while building a node,
	so forcing far down a list never has to unwind a pile of
	pending additions.
'''

from .nodes import Cons, EMPTY, LazyList
from .thunk import force, to_thunk


def range(start, end=None): # pylint: disable=redefined-builtin
	''' The numbers from start up to but not including end.

		Leave out end for a list that never stops. Either bound may
		be given as a deferred value, which is forced straight away.
	'''
	start = force(start)
	if end is None:
		return inf_range(start)
	end = force(end)
	def compute():
		if start < end:
			return Cons(to_thunk(start), range(start + 1, end))
		return EMPTY
	return LazyList(compute)


def inf_range(start):
	''' The numbers from start upwards, forever. '''
	start = force(start)
	return LazyList(lambda: Cons(to_thunk(start), inf_range(start + 1)))
