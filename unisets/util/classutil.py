__all__ = ['Sentinel']


class Sentinel:
    '''
        Named marker object, equal only to itself

        EMPTY = Sentinel('EMPTY')
        assert EMPTY == EMPTY
        assert EMPTY != Sentinel('EMPTY')
    '''
    __slots__ = '_name',

    def __init__(self, name):
        self._name = name

    def __hash__(self):
        return id(self)

    def __eq__(self, other):
        return self is other

    def __ne__(self, other):
        return self is not other

    def __repr__(self):
        return '<{}>'.format(self._name)
