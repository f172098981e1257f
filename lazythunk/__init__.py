''' Lazy lists built out of thunks.

	A thunk is just a function that takes no arguments. A lazy list
	is a thunk that produces a node, and each node holds a thunk for
	its element and a lazy list for everything after it. Nothing is
	worked out until somebody forces it, so lists can go on forever.

	Nothing gets cached either.
'''

from . import errors
from . import formatter
from . import parameters
from .thunk import Constant, Delayed, to_thunk, force
from .nodes import Node, Empty, Cons, LazyList, EMPTY, EMPTY_LIST, is_lazy_list
from .clone import deep_copy
from .construct import from_array, unsafe_to_array, print_list
from .generators import range, inf_range # pylint: disable=redefined-builtin
from .combinators import (
	take, map, filter, # pylint: disable=redefined-builtin
	foldr, foldl, fold,
	head, last, tail, init, at,
	prepended, pushed,
	same_value, is_equal, is_empty, length, reversed, # pylint: disable=redefined-builtin
)
from .errors import LazyListError, EmptyListError, NegativeIndexError, IndexOutOfRangeError
