"""
Cache configuration settings
"""
import os


class CacheConfig:
    """Configuration class for cache settings"""

    # Employee list aggregate
    EMPLOYEES_LIST_KEY = os.getenv("EMPLOYEES_CACHE_KEY", "employees")
    EMPLOYEES_LIST_TTL = int(os.getenv("EMPLOYEES_CACHE_TTL", "300"))  # 5 minutes

    # Redis transport
    REDIS_URL = os.getenv("REDIS_URL", "redis://localhost:6379/0")
    REDIS_MAX_CONNECTIONS = int(os.getenv("REDIS_MAX_CONNECTIONS", "20"))
    REDIS_SOCKET_TIMEOUT = float(os.getenv("REDIS_SOCKET_TIMEOUT", "2"))

    HEALTH_CHECK_KEY = "health_check_test"
