"""
Single-slot cache for the inverse of a matrix.
"""
from matrixcache.cache_cell import CacheCell
from matrixcache.solve import cached_inverse

__all__ = ["CacheCell", "cached_inverse"]
