''' Moving between lazy lists and ordinary Python data. '''

import logging

from . import clone
from . import formatter
from .nodes import Cons, EMPTY, LazyList, element
from .thunk import to_thunk


log = logging.getLogger(__name__)

SEQUENCE_TYPES = (list, tuple)


def from_array(xs):
	''' Build a lazy list out of a sequence.

		The sequence is deep-copied first, so changing it later has
		no effect on the list. Elements that are themselves lists or
		tuples become nested lazy lists. Namedtuples are records and
		stay single elements.
	'''
	if not isinstance(xs, SEQUENCE_TYPES):
		xs = list(xs)
	items = clone.deep_copy(xs)
	return _from_items(items, 0)


def _from_items(items, index):
	def compute():
		if index >= len(items):
			return EMPTY
		item = items[index]
		if isinstance(item, SEQUENCE_TYPES) and not clone.is_record_tuple(item):
			head = _from_items(item, 0)
		else:
			head = to_thunk(item)
		return Cons(head, _from_items(items, index + 1))
	return LazyList(compute)


def unsafe_to_array(xs):
	''' Force an entire lazy list into a python list.

		Nested lazy lists become nested python lists.
		Never returns if the list is infinite.
	'''
	result = []
	node = xs()
	while node:
		value = element(node.head)
		if isinstance(value, LazyList):
			value = unsafe_to_array(value)
		result.append(value)
		node = node.rest()
	log.debug('Converted lazy list of %d elements', len(result))
	return result


def print_list(xs, file=None, **format_options):
	''' Print each element of a list on its own line.

		Elements are printed as soon as they are forced, so this
		can be pointed at an infinite list. Nested lists are
		printed element by element in place. Any keyword arguments
		are passed on to formatter.format for each element.
	'''
	node = xs()
	while node:
		value = element(node.head)
		if isinstance(value, LazyList):
			print_list(value, file=file, **format_options)
		else:
			print(formatter.format(value, **format_options), file=file)
		node = node.rest()
