from .arrayset import ArraySet, hash_order, reversed_order
from .linkedset import LinkedSet
