''' Deferred values.

	A deferred value (a "thunk") is anything that can be called
	with no arguments to produce a value. Plain functions and lambdas
	work just as well as the classes in here, which exist so that
	values can be captured eagerly and have a readable repr.

	Nothing in this module memoizes. Forcing a deferred value twice
	may do the work twice.
'''


class Constant:

	''' Deferred value that produces the object it was built with. '''

	__slots__ = ['value']

	def __init__(self, value):
		self.value = value

	def __call__(self):
		return self.value

	def __repr__(self):
		return 'constant({!r})'.format(self.value)


class Delayed:

	''' Deferred value that calls a function every time it is forced. '''

	__slots__ = ['function']

	def __init__(self, function):
		if not callable(function):
			raise TypeError(f'Cannot delay a {function.__class__}')
		self.function = function

	def __call__(self):
		return self.function()

	def __repr__(self):
		name = getattr(self.function, '__name__', '<unnamed>')
		return 'delayed({})'.format(name)


def to_thunk(value):
	''' Wrap a value that has already been computed.

		The argument is evaluated by Python before this function
		runs, so `to_thunk(n + 1)` captures the sum rather than the
		expression. Recursive generators rely on this to avoid
		building up a chain of pending additions.

		The value is not copied, so changes to a mutable value
		remain visible through the thunk.
	'''
	return Constant(value)


def force(value):
	''' Force a deferred value, or return anything else unchanged. '''
	if callable(value):
		return value()
	return value
