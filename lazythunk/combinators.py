''' Operations on lazy lists.

	Functions that return a list do no work until that list is forced,
	apart from tail and init which check for an empty list up front.
	Forcing a node of a returned list forces at most one node of the
	input, except for filter which keeps going until it finds a match.

	Anything meant to cope with long lists is written as a loop.
	foldr and foldl are the plain recursive versions and are limited
	by Python's recursion limit.

	Functions passed in are given elements: the value for ordinary
	elements and the LazyList itself for nested ones.
'''

import math

from . import errors
from .nodes import Cons, EMPTY, EMPTY_LIST, LazyList, as_head, element
from .thunk import force


def take(n, xs):
	''' The first n elements of a list, or all of them if there are fewer. '''
	def compute():
		count = force(n)
		if count <= 0:
			return EMPTY
		node = xs()
		if not node:
			return EMPTY
		return Cons(node.head, take(count - 1, node.rest))
	return LazyList(compute)


def map(function, xs): # pylint: disable=redefined-builtin
	def compute():
		node = xs()
		if not node:
			return EMPTY
		return Cons(as_head(function(element(node.head))), map(function, node.rest))
	return LazyList(compute)


def filter(predicate, xs): # pylint: disable=redefined-builtin
	def compute():
		node = xs()
		while node:
			value = element(node.head)
			if predicate(value):
				return Cons(as_head(value), filter(predicate, node.rest))
			node = node.rest()
		return EMPTY
	return LazyList(compute)


def foldr(function, initial, xs):
	''' f(x1, f(x2, ... f(xn, initial)))

		Recurses once per element, so long lists raise RecursionError.
	'''
	node = xs()
	if not node:
		return initial
	return function(element(node.head), foldr(function, initial, node.rest))


def foldl(function, accumulator, xs):
	''' f(... f(f(initial, x1), x2) ..., xn)

		Recurses once per element. Use fold for long lists.
	'''
	node = xs()
	if not node:
		return accumulator
	return foldl(function, function(accumulator, element(node.head)), node.rest)


def fold(function, initial, xs):
	''' Same result as foldl, but written as a loop. '''
	accumulator = initial
	node = xs()
	while node:
		accumulator = function(accumulator, element(node.head))
		node = node.rest()
	return accumulator


def head(xs):
	node = xs()
	if not node:
		raise errors.EmptyListError('head')
	return element(node.head)


def last(xs):
	node = xs()
	if not node:
		raise errors.EmptyListError('last')
	while True:
		following = node.rest()
		if not following:
			return element(node.head)
		node = following


def tail(xs):
	node = xs()
	if not node:
		raise errors.EmptyListError('tail')
	return node.rest


def init(xs):
	''' Everything except the last element. '''
	node = xs()
	if not node:
		raise errors.EmptyListError('init')
	return _init_from(node)


def _init_from(node):
	# Each node looks one ahead to see whether it is the last
	def compute():
		following = node.rest()
		if not following:
			return EMPTY
		return Cons(node.head, _init_from(following))
	return LazyList(compute)


def at(xs, index):
	''' The element at a zero-based index. '''
	if index < 0:
		raise errors.NegativeIndexError(index)
	node = xs()
	remaining = index
	while node and remaining > 0:
		node = node.rest()
		remaining -= 1
	if not node:
		raise errors.IndexOutOfRangeError(index)
	return element(node.head)


def prepended(value, xs):
	new_head = as_head(value)
	return LazyList(lambda: Cons(new_head, xs))


def pushed(value, xs):
	''' A list with value added to the end.

		The end of an infinite list is never reached, so pushing onto
		one gives back a list with the same elements.
	'''
	return _pushed(as_head(value), xs)


def _pushed(new_head, xs):
	def compute():
		node = xs()
		if not node:
			return Cons(new_head, EMPTY_LIST)
		return Cons(node.head, _pushed(new_head, node.rest))
	return LazyList(compute)


def same_value(a, b):
	''' Compare two elements by value.

		NaN is the same as NaN, 0.0 and -0.0 are different,
		and booleans only ever match other booleans.
	'''
	if isinstance(a, bool) or isinstance(b, bool):
		return isinstance(a, bool) and isinstance(b, bool) and a == b
	if isinstance(a, float) and isinstance(b, float) and math.isnan(a) and math.isnan(b):
		return True
	if isinstance(a, (int, float)) and isinstance(b, (int, float)):
		if a == 0 and b == 0:
			return math.copysign(1, a) == math.copysign(1, b)
	return a == b


def is_equal(xs, ys):
	''' Check two lists have the same elements in the same order.

		Nested lists are compared recursively. A nested list never
		matches an ordinary element.
	'''
	x_node = xs()
	y_node = ys()
	while x_node and y_node:
		x = element(x_node.head)
		y = element(y_node.head)
		x_nested = isinstance(x, LazyList)
		y_nested = isinstance(y, LazyList)
		if x_nested and y_nested:
			if not is_equal(x, y):
				return False
		elif x_nested or y_nested:
			return False
		elif not same_value(x, y):
			return False
		x_node = x_node.rest()
		y_node = y_node.rest()
	return not x_node and not y_node


def is_empty(xs):
	return not xs()


def length(xs):
	return fold(lambda count, _: count + 1, 0, xs)


def reversed(xs): # pylint: disable=redefined-builtin
	''' The outer layer of a list, backwards.

		Walks the whole input straight away. Nested lists are kept
		as they are.
	'''
	return fold(lambda acc, value: prepended(value, acc), EMPTY_LIST, xs)
