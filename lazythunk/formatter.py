''' Lazy list formatter.

	Used to turn lazy lists, including nested and infinite ones,
	and the values inside them into a flat, human-readable string.
'''

import logging

import sympy
from sympy.printing.str import StrPrinter

from . import errors
from . import nodes


log = logging.getLogger(__name__)

ELEMENT_SEPARATOR = ', '


class Collector:

	''' Buffers print-like commands in order to make things
		fast and also limit the total size of the output.
	'''

	def __init__(self, limit=None):
		self.parts = []
		self.length = 0
		self.limit = limit

	def print(self, *args):
		''' Add some stuff to the buffer.
			Raises an exception if it overflows.
		'''
		self.parts += args
		self.length += sum(map(len, args))
		if self.limit and self.length > self.limit:
			raise errors.TooMuchOutputError

	def drop(self):
		''' Remove the last item from the buffer. '''
		self.parts.pop()

	def __str__(self):
		''' Reduce to a string. '''
		output = ''.join(self.parts)
		if self.limit and len(output) > self.limit:
			output = output[:self.limit - 3] + '...'
		return output


class InfinityPrinter(StrPrinter):

	''' Spells out sympy's infinities instead of printing oo and zoo. '''

	def _print_Infinity(self, expr):
		return 'infinity'

	def _print_NegativeInfinity(self, expr):
		return '-infinity'

	def _print_ComplexInfinity(self, expr):
		return 'complex_infinity'


class SimpleFormatter:

	''' Walks values and writes them to a collector.

		Lazy lists are forced one node at a time, so with a limit
		set an infinite list stops being walked once the output
		is full.
	'''

	def __init__(self, limit=None, separator=ELEMENT_SEPARATOR, pretty_sympy=False):
		self._collector = Collector(limit=limit)
		self.separator = separator
		self.pretty_sympy = pretty_sympy

	def drop(self):
		''' Remove the most recently added item '''
		self._collector.drop()

	def fmt(self, *args):
		''' Format a number of objects '''
		for i in args:
			if i is None:
				self._collector.print('null')
			elif isinstance(i, bool):
				self.fmt_py_bool(i)
			elif isinstance(i, str):
				self.fmt_py_string(i)
			elif isinstance(i, nodes.LazyList):
				self.fmt_list(i)
			elif isinstance(i, (list, tuple)):
				self.fmt_py_list(i)
			elif isinstance(i, sympy.Basic):
				self.fmt_sympy_object(i)
			else:
				self.fmt_py_string(str(i))

	def fmt_py_bool(self, b):
		''' Format a boolean value '''
		self._collector.print('true' if b else 'false')

	def fmt_py_string(self, i):
		''' Format a string, which means just add it to the output '''
		self._collector.print(i)

	def fmt_list(self, lst):
		''' Format a lazy list '''
		node = lst()
		if not node:
			self._collector.print('[]')
			return
		self._collector.print('[')
		while node:
			self.fmt(nodes.element(node.head), self.separator)
			node = node.rest()
		self.drop()
		self._collector.print(']')

	def fmt_py_list(self, lst):
		''' Format a python list '''
		self.fmt('(')
		for i in lst:
			self.fmt(i, ', ') # leave alone as it needs to remain Python syntax
		if lst:
			self.drop()
		self.fmt(')')

	def fmt_sympy_object(self, obj):
		''' Format a sympy object '''
		if self.pretty_sympy:
			self._collector.print(InfinityPrinter().doprint(obj))
		else:
			self._collector.print(str(obj))

	def __str__(self):
		return str(self._collector)


def format(*values, limit=None, separator=ELEMENT_SEPARATOR, pretty_sympy=False): # pylint: disable=redefined-builtin
	''' Format some values, producing a human-readable string.

		Output longer than the limit is cut short and ends in '...'.
		Without a limit, formatting an infinite list never returns.
	'''
	fmtr = SimpleFormatter(limit=limit, separator=separator, pretty_sympy=pretty_sympy)
	try:
		fmtr.fmt(*values)
	except errors.TooMuchOutputError:
		log.debug('Formatted output truncated at %d characters', limit)
	return str(fmtr)
