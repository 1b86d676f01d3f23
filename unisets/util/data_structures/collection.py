from collections.abc import Container, MutableSet

__all__ = ['UniqueCollection', 'SetIterator']


class UniqueCollection(MutableSet):
    '''
        MutableSet with bulk operations that report whether they changed
        anything. Subclasses implement add/discard returning a bool.
    '''
    __slots__ = ()

    def add_all(self, it):
        changed = False
        for val in it:
            changed |= self.add(val)
        return changed

    def remove_all(self, it):
        if it is self:
            changed = len(self) > 0
            self.clear()
            return changed

        changed = False
        for val in it:
            changed |= self.discard(val)
        return changed

    def retain_all(self, it):
        # membership is tested once per element, iterators would be exhausted
        if not isinstance(it, Container):
            it = self._from_iterable(it)

        # collect first, removal shifts or unlinks under a live iterator
        victims = [val for val in self if val not in it]
        for val in victims:
            self.discard(val)
        return bool(victims)

    def contains_all(self, it):
        return all(val in self for val in it)

    def is_empty(self):
        return len(self) == 0

    def to_array(self, factory=list):
        return factory(self)


class SetIterator:
    '''
        Iterator that can remove the value it yielded last from the
        underlying set. Subclasses implement _advance, which returns the
        next value or raises StopIteration.
    '''
    __slots__ = '_set', '_last', '_removable'

    def __init__(self, s):
        self._set = s
        self._last = None
        self._removable = False

    def __iter__(self):
        return self

    def __next__(self):
        val = self._advance()
        self._last = val
        self._removable = True
        return val

    def _advance(self):
        raise NotImplementedError()

    def _removed(self):
        pass

    def remove(self):
        if not self._removable:
            raise RuntimeError('The iterator has no element to remove')

        val = self._last
        self._last = None
        self._removable = False
        if not self._set.discard(val):
            raise RuntimeError('{} is no longer an element of the set'.format(val))
        self._removed()
