__all__ = ['config', 'DEFAULTS']


class config:
    '''
        attribute bag for package defaults

        config(capacity=10)['capacity'] == config(capacity=10).capacity
    '''
    def __init__(self, d=None, **kwargs):
        if d:
            for k, v in d.items():
                setattr(self, k, v)

        for k, v in kwargs.items():
            setattr(self, k, v)

    def __getitem__(self, k):
        try:
            return getattr(self, k)
        except AttributeError:
            raise KeyError("Missing config value for: {}".format(k))

    def __repr__(self):
        c = []
        for k, v in sorted(vars(self).items()):
            c.append('{}={!r}'.format(k, v))
        return 'config(' + ', '.join(c) + ')'


DEFAULTS = config(
        capacity=10,
        hash_prime=83,
        hash_bits=32,
)
