"""
Database module for the employee registry
Handles PostgreSQL and Redis connections and the employee store
"""

from .connection import (
    create_db_engine, create_session_factory, create_redis_client,
    create_tables, get_db, get_cache
)
from .models import Base, Employee, Contact
from .store import EmployeeStore

__all__ = [
    "create_db_engine", "create_session_factory", "create_redis_client",
    "create_tables", "get_db", "get_cache",
    "Base", "Employee", "Contact",
    "EmployeeStore"
]
