from collections.abc import Reversible, Set

from .collection import UniqueCollection, SetIterator

__all__ = ['LinkedSet', 'NIL']

NIL = -1


class LinkedSet(UniqueCollection):
    '''
        Set kept as a doubly linked chain of nodes. New elements are linked
        in at the front, so iteration runs from the most recently added
        element to the oldest.

        Nodes live in parallel lists addressed by index (_values, _next,
        _prev); indices of removed nodes go on a free list and are reused
        by later adds.

        Two values are the same member when they have the same type and the
        same hash. Distinct values that collide on hash are therefore
        treated as duplicates.
    '''
    __slots__ = '_values', '_next', '_prev', '_free', '_front', '_rear', '_size'

    def __init__(self, it=()):
        self._reset()
        for val in it:
            self.add(val)

    def _reset(self):
        self._values = []
        self._next = []
        self._prev = []
        self._free = []
        self._front = NIL
        self._rear = NIL
        self._size = 0

    def __len__(self):
        return self._size

    def __contains__(self, val):
        return self._find(val) != NIL

    def __iter__(self):
        return _LinkedSetIterator(self)

    def __eq__(self, other):
        # ordered sets decide, and never equal an unordered one
        if isinstance(other, Set) and isinstance(other, Reversible):
            return NotImplemented
        return super().__eq__(other)

    def _matches(self, node, val, h):
        other = self._values[node]
        return type(other) is type(val) and hash(other) == h

    def _find(self, val):
        '''
           Index of the node holding val, or NIL.

           One cursor walks forward from the front while another walks
           backward from the rear, so a lookup takes at most
           ceil(size / 2) steps wherever val sits in the chain.
        '''
        h = hash(val)
        a, z = self._front, self._rear
        for _ in range((self._size + 1) >> 1):
            if self._matches(a, val, h):
                return a
            if self._matches(z, val, h):
                return z
            a = self._next[a]
            z = self._prev[z]

        return NIL

    def _alloc(self, val):
        if self._free:
            node = self._free.pop()
            self._values[node] = val
        else:
            node = len(self._values)
            self._values.append(val)
            self._next.append(NIL)
            self._prev.append(NIL)
        return node

    def add(self, val):
        if self._find(val) != NIL:
            return False

        node = self._alloc(val)
        front = self._front
        self._next[node] = front
        self._prev[node] = NIL
        if front == NIL:
            self._rear = node
        else:
            self._prev[front] = node
        self._front = node
        self._size += 1
        return True

    def discard(self, val):
        node = self._find(val)
        if node == NIL:
            return False

        self._unlink(node)
        return True

    def _unlink(self, node):
        p, n = self._prev[node], self._next[node]
        if p == NIL:
            self._front = n
        else:
            self._next[p] = n

        if n == NIL:
            self._rear = p
        else:
            self._prev[n] = p

        self._values[node] = None
        self._next[node] = self._prev[node] = NIL
        self._free.append(node)
        self._size -= 1

    def clear(self):
        self._reset()

    def to_array(self, factory=list):
        size = self._size
        result = [None] * size
        a, z = self._front, self._rear
        for i in range((size + 1) >> 1):
            result[i] = self._values[a]
            result[size - 1 - i] = self._values[z]
            a = self._next[a]
            z = self._prev[z]

        if factory is list:
            return result
        return factory(result)

    def __repr__(self):
        c = []
        for v in self:
            c.append('{}'.format(v))

        s = 'LinkedSet({' + ', '.join(c) + '})'
        return s

    def _attest(self):
        prev = NIL
        node = self._front
        seen = 0
        while node != NIL:
            assert self._prev[node] == prev
            prev = node
            node = self._next[node]
            seen += 1

        assert prev == self._rear
        assert seen == self._size
        assert len(self._free) + self._size == len(self._values)


class _LinkedSetIterator(SetIterator):
    __slots__ = '_node',

    def __init__(self, s):
        super().__init__(s)
        self._node = s._front

    def _advance(self):
        node = self._node
        if node == NIL:
            raise StopIteration()

        s = self._set
        self._node = s._next[node]
        return s._values[node]
