import functools as ft
from itertools import islice
import logging
from collections.abc import Reversible, Set

from ...config.config import DEFAULTS
from ..classutil import Sentinel
from .collection import UniqueCollection, SetIterator

__all__ = ['ArraySet', 'hash_order', 'reversed_order']

logger = logging.getLogger(__name__)

_EMPTY = Sentinel('EMPTY')


def hash_order(a, b):
    '''
    hash_order :: a -> b -> int
    default total order, compares the hash values of a and b
    '''
    ha, hb = hash(a), hash(b)
    return (ha > hb) - (ha < hb)


class _ReversedOrder:
    __slots__ = 'order',

    def __init__(self, order):
        self.order = order

    def __call__(self, a, b):
        return self.order(b, a)

    def __repr__(self):
        return 'reversed_order({!r})'.format(self.order)


def reversed_order(order):
    if isinstance(order, _ReversedOrder):
        return order.order
    return _ReversedOrder(order)


def _wrap(value, bits):
    ''' two's complement truncation of value to a signed int of width bits '''
    m = 1 << bits
    value &= m - 1
    if value >= m >> 1:
        value -= m
    return value


class ArraySet(UniqueCollection, Reversible):
    '''
        Sorted set stored in a list that grows by a fixed amount.

        Elements are kept in ascending order under an order function
        (cmp convention: negative, zero or positive int). Two elements the
        order function reports as equal are the same member. The default
        order compares hash values.

        The backing list always has `limit` slots; the first `len(self)`
        hold elements and the rest hold an empty marker. When an add finds
        the list full, it grows by `capacity` slots.
    '''
    __slots__ = '_data', '_size', '_capacity', '_order'

    def __init__(self, it=(), *, capacity=None, comparator=None):
        if capacity is None:
            try:
                capacity = len(it) or DEFAULTS.capacity
            except TypeError:
                capacity = DEFAULTS.capacity

        self.capacity = capacity
        self._order = hash_order if comparator is None else comparator
        self._size = 0
        self._data = [_EMPTY] * self._capacity

        for val in it:
            self.add(val)

    @property
    def capacity(self):
        ''' number of slots added to the backing list on each resize '''
        return self._capacity

    @capacity.setter
    def capacity(self, capacity):
        if capacity <= 0:
            raise ValueError('Capacity must be > 0')
        self._capacity = capacity

    @property
    def limit(self):
        ''' size at which the next add has to resize '''
        return len(self._data)

    @property
    def comparator(self):
        return self._order

    def __len__(self):
        return self._size

    def __contains__(self, val):
        return self.index_of(val) >= 0

    def __iter__(self):
        return _ForwardIterator(self)

    def __reversed__(self):
        return _BackwardIterator(self)

    def reversed_iterator(self):
        return _BackwardIterator(self)

    def __getitem__(self, index):
        if index < 0 or index >= self._size:
            raise IndexError('{} is out of range [0, {})'.format(index, self._size))
        return self._data[index]

    def _live(self):
        return islice(self._data, self._size)

    def _grow_if_full(self):
        if self._size == len(self._data):
            self.resize(self._capacity)

    def add(self, val):
        size = self._size
        order = self._order

        # appending past the current maximum needs no search
        if size == 0 or order(self._data[size - 1], val) < 0:
            self._grow_if_full()
            self._data[size] = val
            self._size = size + 1
            return True

        index = 0
        if order(val, self._data[0]) >= 0:
            index = self.index_of(val)
            if index >= 0:
                return False
            index = -index - 1

        self._grow_if_full()
        data = self._data
        data[index + 1:size + 1] = data[index:size]
        data[index] = val
        self._size = size + 1
        return True

    def resize(self, growth):
        '''
           Grows the backing list by growth slots. Called automatically
           when an add finds the list full; calling it ahead of a large
           batch of adds avoids repeated small resizes.
        '''
        if growth <= 0:
            raise ValueError('Capacity must be > 0')
        old = len(self._data)
        self._data.extend([_EMPTY] * growth)
        logger.debug('%s resized from %d to %d slots', type(self).__name__, old, len(self._data))

    def index_of(self, val):
        '''
           Position of val if present, otherwise -(insertion point) - 1.

           Bounds are checked first, then the search window is narrowed to
           the lower or upper half by a single comparison with the middle
           element before the binary search runs.
        '''
        size = self._size
        if size == 0:
            return -1

        data = self._data
        order = self._order
        if order(val, data[size - 1]) > 0:
            return -size - 1
        if order(val, data[0]) < 0:
            return -1

        low, high = 0, size >> 1
        if order(val, data[high]) > 0:
            low, high = high, size - 1

        return self._binary_search(low, high, val)

    def _binary_search(self, low, high, val):
        data = self._data
        order = self._order
        while low <= high:
            mid = (low + high) >> 1
            c = order(data[mid], val)
            if c < 0:
                low = mid + 1
            elif c > 0:
                high = mid - 1
            else:
                return mid

        return -low - 1

    def discard(self, val):
        size = self._size
        if size == 0:
            return False

        # outside [first, last] cannot be a member
        order = self._order
        if order(val, self._data[0]) < 0 or order(val, self._data[size - 1]) > 0:
            return False

        index = self.index_of(val)
        if index < 0:
            return False

        self._delete(index)
        return True

    def _delete(self, index):
        size = self._size
        data = self._data
        data[index:size - 1] = data[index + 1:size]
        data[size - 1] = _EMPTY
        self._size = size - 1

    def remove_at(self, index):
        self.extract(index)

    def extract(self, index):
        val = self[index]
        self._delete(index)
        return val

    def first(self):
        if self._size == 0:
            return None
        return self._data[0]

    def last(self):
        if self._size == 0:
            return None
        return self._data[self._size - 1]

    def clear(self):
        '''
           Removes every element but keeps the backing list, so the set
           will not resize again until it reaches the old limit.
           Use free to release the slack as well.
        '''
        self._data[:self._size] = [_EMPTY] * self._size
        self._size = 0

    def free(self):
        self.clear()
        self._data = [_EMPTY] * self._capacity
        logger.debug('%s freed to %d slots', type(self).__name__, self._capacity)

    def trim(self):
        self._data = self._data[:self._size]
        logger.debug('%s trimmed to %d slots', type(self).__name__, self._size)

    def to_array(self, factory=list):
        return factory(self._data[:self._size])

    def _copy_range(self, start, stop):
        return type(self)(self._data[start:stop], comparator=self._order)

    def _from_iterable(self, it):
        return type(self)(it, comparator=self._order)

    def _member_index(self, val):
        index = self.index_of(val)
        if index < 0:
            raise ValueError('{} is not an element of this set'.format(val))
        return index

    def head_set(self, to_val):
        '''
           New set of the elements before to_val. to_val must itself be an
           element of this set.
        '''
        return self._copy_range(0, self._member_index(to_val))

    def tail_set(self, from_val):
        '''
           New set of from_val and every element after it. from_val must
           itself be an element of this set.
        '''
        return self._copy_range(self._member_index(from_val), self._size)

    def sub_set(self, from_val, to_val):
        '''
           New set of the elements from from_val (inclusive) to to_val
           (exclusive). Both bounds must be elements of this set.
        '''
        start = self._member_index(from_val)
        stop = self._member_index(to_val)
        if start > stop:
            raise ValueError('{} comes after {}'.format(from_val, to_val))
        return self._copy_range(start, stop)

    def _sort(self):
        live = self._data[:self._size]
        live.sort(key=ft.cmp_to_key(self._order))
        self._data[:self._size] = live

    def reverse(self):
        self._order = reversed_order(self._order)
        self._sort()
        logger.debug('%s reversed to %r', type(self).__name__, self._order)

    def set_comparator(self, comparator):
        if comparator is None:
            raise ValueError('Comparator cannot be None')
        self._order = comparator
        self._sort()
        logger.debug('%s comparator set to %r', type(self).__name__, comparator)

    def get_any(self, cond):
        ''' first element that satisfies cond, or None '''
        for val in self._live():
            if cond(val):
                return val
        return None

    def get_last(self, cond):
        ''' last element that satisfies cond, or None '''
        for index in reversed(range(self._size)):
            val = self._data[index]
            if cond(val):
                return val
        return None

    def get_all(self, cond):
        s = type(self)((val for val in self._live() if cond(val)), comparator=self._order)
        s.trim()
        return s

    def retain_if(self, cond):
        changed = False
        index = 0
        while index < self._size:
            if cond(self._data[index]):
                index += 1
            else:
                self._delete(index)
                changed = True
        return changed

    def __eq__(self, other):
        if not isinstance(other, Set):
            return NotImplemented
        # unordered sets never equal an ordered one
        if not isinstance(other, Reversible):
            return False
        if len(other) != self._size:
            return False
        return all(a == b for a, b in zip(self._live(), other))

    def __hash__(self):
        bits = DEFAULTS.hash_bits
        prime = DEFAULTS.hash_prime
        result = 1
        for val in self._live():
            result = _wrap(result * (prime * _wrap(hash(val), bits)), bits)
        return result

    def __repr__(self):
        c = []
        for v in self._live():
            c.append('{}'.format(v))

        s = '{}[size={},capacity={},limit={}] => [{}]'.format(
                type(self).__name__,
                self._size,
                self._capacity,
                self.limit,
                ', '.join(c),
                )
        return s

    def _attest(self):
        for a, b in zip(self._live(), islice(self._data, 1, self._size)):
            assert self._order(a, b) < 0

        for index in range(self._size):
            assert self._data[index] is not _EMPTY

        for index in range(self._size, len(self._data)):
            assert self._data[index] is _EMPTY


class _ForwardIterator(SetIterator):
    __slots__ = '_index',

    def __init__(self, s):
        super().__init__(s)
        self._index = 0

    def _advance(self):
        s = self._set
        if self._index >= s._size:
            raise StopIteration()
        val = s._data[self._index]
        self._index += 1
        return val

    def _removed(self):
        # the next element was shifted into the removed slot
        self._index -= 1


class _BackwardIterator(SetIterator):
    __slots__ = '_index',

    def __init__(self, s):
        super().__init__(s)
        self._index = len(s) - 1

    def _advance(self):
        if self._index < 0:
            raise StopIteration()
        val = self._set._data[self._index]
        self._index -= 1
        return val
