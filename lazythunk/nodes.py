''' Lazy list nodes.

	A lazy list is a deferred value that, when forced, produces a node.
	A node is either EMPTY or a Cons of a deferred head and the rest of
	the list, which is another lazy list. Only the nodes that somebody
	actually asks for are ever built.

	The head of a Cons is either a nested LazyList or some other
	deferred value holding an ordinary element. The LazyList class
	is the tag that tells the two apart.
'''

import inspect

from .thunk import Constant, to_thunk


class Node:

	__slots__ = []


class Empty(Node):

	''' The end of a list. Use the EMPTY instance. '''

	__slots__ = []

	def __bool__(self):
		return False

	def __repr__(self):
		return 'EMPTY'


class Cons(Node):

	__slots__ = ['head', 'rest']

	def __init__(self, head, rest):
		if not callable(head):
			raise TypeError(f'Head of a Cons must be a deferred value, not a {head.__class__}')
		self.head = head
		self.rest = rest if isinstance(rest, LazyList) else LazyList(rest)

	def __bool__(self):
		return True

	def __repr__(self):
		return 'Cons({!r}, ...)'.format(self.head)


class LazyList:

	''' A deferred value that produces a Node.

		Calling the list forces it. The function is run again on every
		force, so it should be free of side effects.
	'''

	__slots__ = ['_compute']

	def __init__(self, compute):
		if not callable(compute):
			raise TypeError(f'Cannot create a LazyList from a {compute.__class__}')
		self._compute = compute

	def __call__(self):
		node = self._compute()
		if not isinstance(node, Node):
			raise TypeError(f'LazyList forced to a {node.__class__} instead of a node')
		return node

	# Static so that the generator does not hold on to the first node
	# while walking a long list.
	@staticmethod
	def _iter(node):
		while node:
			yield element(node.head)
			node = node.rest()

	def __iter__(self):
		return self._iter(self())

	def __repr__(self):
		return 'LazyList(...)'


EMPTY = Empty()
EMPTY_LIST = LazyList(Constant(EMPTY))


def is_lazy_list(value):
	''' Check whether something is a lazy list.

		LazyList instances are recognised without being forced.
		Any other callable that can be called with no arguments is
		forced once and counts as a list if it produces a node.
		Errors raised while forcing it are not caught.
	'''
	if isinstance(value, LazyList):
		return True
	if not callable(value) or not _takes_no_arguments(value):
		return False
	return isinstance(value(), Node)


def _takes_no_arguments(function):
	try:
		signature = inspect.signature(function)
	except (TypeError, ValueError):
		# Builtins with no signature are never lists
		return False
	try:
		signature.bind()
	except TypeError:
		return False
	return True


def element(head):
	''' Get the element held by the head of a Cons.

		Nested lists are returned without being forced. Other heads
		are forced exactly once.
	'''
	if isinstance(head, LazyList):
		return head
	value = head()
	if isinstance(value, Node):
		# A bare callable that produces nodes is a list in disguise
		return LazyList(head)
	return value


def as_head(value):
	''' Turn an element into something that can sit at the head of a Cons. '''
	if isinstance(value, LazyList):
		return value
	return to_thunk(value)
