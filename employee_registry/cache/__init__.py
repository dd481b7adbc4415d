"""
Cache module for the employee registry
Provides Redis-based caching with TTL and invalidation
"""

from .manager import CacheManager
from .config import CacheConfig

__all__ = [
    'CacheManager',
    'CacheConfig'
]
