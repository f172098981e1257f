import copy


def deep_copy(obj):
	''' Copy a value all the way down.

		Lists, tuples and dicts are walked here and come back with
		the same type they went in with, so namedtuples, OrderedDicts
		and defaultdicts survive the copy. Anything else goes through
		copy.deepcopy.
	'''
	if isinstance(obj, dict):
		# Copying first keeps the subclass and things like default_factory
		result = copy.copy(obj)
		for key, value in obj.items():
			result[key] = deep_copy(value)
		return result
	elif type(obj) is list:
		return [deep_copy(i) for i in obj]
	elif type(obj) is tuple:
		return tuple(deep_copy(i) for i in obj)
	elif is_record_tuple(obj):
		return type(obj)(*(deep_copy(i) for i in obj))
	return copy.deepcopy(obj)


def is_record_tuple(obj):
	''' Namedtuples are records rather than sequences. '''
	return isinstance(obj, tuple) and hasattr(type(obj), '_fields')
