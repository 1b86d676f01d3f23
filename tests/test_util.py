import pytest

from unisets.config.config import config, DEFAULTS
from unisets.util.classutil import Sentinel


def test_defaults():
    assert DEFAULTS.capacity == 10
    assert DEFAULTS['hash_prime'] == 83
    assert DEFAULTS['hash_bits'] == 32


def test_config_missing_key():
    c = config({'a': 1}, b=2)
    assert c['a'] == 1
    assert c.b == 2
    with pytest.raises(KeyError):
        c['missing']
    assert repr(c) == 'config(a=1, b=2)'


def test_sentinel_identity():
    a = Sentinel('EMPTY')
    b = Sentinel('EMPTY')
    assert a == a
    assert a != b
    assert repr(a) == '<EMPTY>'
