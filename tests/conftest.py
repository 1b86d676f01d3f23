import pytest


class Collide:
    '''value with a chosen hash, equal only to values with the same payload'''
    __slots__ = 'value', 'h'

    def __init__(self, value, h):
        self.value = value
        self.h = h

    def __eq__(self, other):
        return isinstance(other, Collide) and self.value == other.value

    def __hash__(self):
        return self.h

    def __repr__(self):
        return 'Collide({!r}, {})'.format(self.value, self.h)


class Counted:
    __slots__ = 'value', 'counter'

    def __init__(self, value, counter):
        self.value = value
        self.counter = counter

    def __eq__(self, other):
        return isinstance(other, Counted) and self.value == other.value

    def __hash__(self):
        self.counter.calls += 1
        return hash(self.value)

    def __repr__(self):
        return 'Counted({!r})'.format(self.value)


class HashCounter:
    '''makes Counted values and tallies how often they are hashed'''
    def __init__(self):
        self.calls = 0

    def __call__(self, value):
        return Counted(value, self)

    def reset(self):
        self.calls = 0


def by_len(a, b):
    return (len(a) > len(b)) - (len(a) < len(b))


@pytest.fixture
def collide():
    return Collide


@pytest.fixture
def counter():
    return HashCounter()


@pytest.fixture
def len_order():
    return by_len
