from .util.data_structures import ArraySet, LinkedSet, hash_order, reversed_order

__all__ = ['ArraySet', 'LinkedSet', 'hash_order', 'reversed_order']
