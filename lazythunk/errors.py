from . import formatter


class TooMuchOutputError(Exception):
	pass


class FormattedError(Exception):

	def __init__(self, description, *values):
		if len(values) == 0:
			self.description = description
		else:
			formatted = list(map(lambda x: formatter.format(x, limit = 2000), values))
			self.description = description.format(*formatted)

	def __str__(self):
		return self.description


class LazyListError(FormattedError):
	''' A lazy list operation was used in a way it does not support '''


class EmptyListError(LazyListError):
	''' Asked for part of a list that has no elements '''
	def __init__(self, operation):
		super().__init__('{}: empty list', operation)
		self.operation = operation


class NegativeIndexError(LazyListError):
	''' Indexed a list with a number below zero '''
	def __init__(self, index):
		super().__init__('at: negative index {}', index)
		self.index = index


class IndexOutOfRangeError(LazyListError):
	''' Indexed past the end of a list '''
	def __init__(self, index):
		super().__init__('at: index {} out of range', index)
		self.index = index
