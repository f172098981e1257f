import collections
import pytest
import sympy
from types import SimpleNamespace

import lazythunk
from lazythunk import from_array, unsafe_to_array, print_list, deep_copy
from lazythunk.nodes import EMPTY

from lazy_helpers import *


Point = collections.namedtuple('Point', ['x', 'y'])


def test_from_array_empty():
	assert from_array([])() is EMPTY


def test_unsafe_to_array_empty():
	assert unsafe_to_array(from_array([])) == []


def test_round_trip():
	assert unsafe_to_array(from_array([1, 2, 3])) == [1, 2, 3]
	assert unsafe_to_array(from_array(['a', None, 2.5, True])) == ['a', None, 2.5, True]


def test_round_trip_nested():
	given = [
		[[1], [2]],
		[[3], [4]],
	]
	assert unsafe_to_array(from_array(given)) == given
	assert unsafe_to_array(from_array([[], [[]], 1])) == [[], [[]], 1]


def test_from_array_isolated_from_mutation():
	given = [
		[[1], [2]],
		[[3], [4]],
	]
	xsss = from_array(given)
	given[0][0][0] = 1000
	given.append(5)
	assert unsafe_to_array(xsss) == [
		[[1], [2]],
		[[3], [4]],
	]


def test_from_array_copies_records():
	record = {'name': 'a', 'tags': ['x']}
	xs = from_array([record])
	record['tags'].append('y')
	assert unsafe_to_array(xs) == [{'name': 'a', 'tags': ['x']}]


def test_from_array_copies_objects():
	record = SimpleNamespace(tags=['x'])
	xs = from_array([record])
	record.tags.append('y')
	copied = arr(xs)[0]
	assert copied is not record
	assert copied.tags == ['x']


def test_from_array_copies_sets():
	s = {1}
	xs = from_array([s])
	s.add(2)
	assert arr(xs) == [{1}]


def test_from_array_keeps_namedtuples_whole():
	assert arr(from_array([Point(1, 2), (3, 4)])) == [Point(1, 2), [3, 4]]
	assert type(arr(from_array([Point(1, 2)]))[0]) is Point


def test_from_array_tuples_become_lists():
	assert unsafe_to_array(from_array((1, (2, 3)))) == [1, [2, 3]]


def test_from_array_other_iterables():
	assert unsafe_to_array(from_array('Hello')) == ['H', 'e', 'l', 'l', 'o']
	assert unsafe_to_array(from_array(x * x for x in [1, 2, 3])) == [1, 4, 9]


def test_from_array_is_reusable():
	xs = from_array([1, 2])
	assert unsafe_to_array(xs) == [1, 2]
	assert unsafe_to_array(xs) == [1, 2]


def test_deep_copy_nested_lists():
	xs = [
		[[1, 2], [3, 4]],
		[[5], [6, 7, 8]],
	]
	ys = deep_copy(xs)
	xs[0][0][0] = 10000
	assert ys == [
		[[1, 2], [3, 4]],
		[[5], [6, 7, 8]],
	]


def test_deep_copy_nested_dicts():
	obj1 = {
		'a': [[1, 2], [3, 4]],
		'b': {'c': 'hello', 'd': ['world!']},
	}
	obj2 = deep_copy(obj1)
	obj1['a'][0][0] = 1000
	obj1['b']['c'] = 'hell'
	assert obj2 == {
		'a': [[1, 2], [3, 4]],
		'b': {'c': 'hello', 'd': ['world!']},
	}


def test_deep_copy_keeps_types():
	obj = {'p': Point(1, [2])}
	copied = deep_copy(obj)
	assert type(copied['p']) is Point
	obj['p'].y.append(3)
	assert copied == {'p': Point(1, [2])}


def test_deep_copy_ordered_dict():
	obj = collections.OrderedDict([('b', [1]), ('a', [2])])
	copied = deep_copy(obj)
	obj['b'].append(5)
	assert type(copied) is collections.OrderedDict
	assert list(copied.keys()) == ['b', 'a']
	assert copied['b'] == [1]


def test_deep_copy_default_dict():
	obj = collections.defaultdict(list, {'a': [1]})
	copied = deep_copy(obj)
	obj['a'].append(2)
	assert type(copied) is collections.defaultdict
	assert copied['a'] == [1]
	assert copied['missing'] == []


def test_deep_copy_objects():
	record = SimpleNamespace(name='a', tags={'x'})
	copied = deep_copy({'record': record})['record']
	record.tags.add('y')
	assert copied is not record
	assert copied.tags == {'x'}


@pytest.mark.parametrize('value', [1, 'hi', None, True, 2.5, len])
def test_deep_copy_scalars(value):
	assert deep_copy(value) is value


def test_print_list(capsys):
	print_list(lazythunk.range(0, 3))
	assert capsys.readouterr().out == '0\n1\n2\n'


def test_print_list_nested(capsys):
	print_list(from_array([1, [2, [3]], 4]))
	assert capsys.readouterr().out == '1\n2\n3\n4\n'


def test_print_list_values(capsys):
	print_list(from_array(['text', None, True]))
	assert capsys.readouterr().out == 'text\nnull\ntrue\n'


def test_print_list_empty(capsys):
	print_list(from_array([]))
	assert capsys.readouterr().out == ''


def test_print_list_streams(capsys):
	xs = lazythunk.prepended(1, lazythunk.prepended(2, lazythunk.LazyList(explode)))
	with pytest.raises(AssertionError):
		print_list(xs)
	assert capsys.readouterr().out == '1\n2\n'


def test_print_list_infinite(capsys):
	print_list(lazythunk.take(3, lazythunk.range(10)))
	assert capsys.readouterr().out == '10\n11\n12\n'


def test_print_list_format_options(capsys):
	print_list(from_array(['abcdefghijkl', 1]), limit=8)
	assert capsys.readouterr().out == 'abcde...\n1\n'
	print_list(lazythunk.prepended(sympy.oo, from_array([[sympy.oo]])), pretty_sympy=True)
	assert capsys.readouterr().out == 'infinity\ninfinity\n'
