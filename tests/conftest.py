import pytest
from unittest.mock import Mock
from sqlalchemy.pool import StaticPool

from employee_registry.cache.manager import CacheManager
from employee_registry.database.connection import (
    create_db_engine, create_session_factory, create_tables
)
from employee_registry.database.store import EmployeeStore

TEST_DATABASE_URL = "sqlite://"

@pytest.fixture
def engine():
    """In-memory SQLite engine shared across threads"""
    engine = create_db_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    create_tables(engine)
    yield engine
    engine.dispose()

@pytest.fixture
def db(engine):
    session = create_session_factory(engine)()
    try:
        yield session
    finally:
        session.close()

@pytest.fixture
def store(db):
    return EmployeeStore(db)

@pytest.fixture
def redis_data():
    """Backing dict for the fake Redis client"""
    return {}

@pytest.fixture
def mock_redis(redis_data):
    """Mock Redis client holding values in redis_data"""
    def setex(key, ttl, value):
        redis_data[key] = value
        return True
    
    def delete(*keys):
        return sum(1 for key in keys if redis_data.pop(key, None) is not None)
    
    client = Mock()
    client.ping.return_value = True
    client.get.side_effect = lambda key: redis_data.get(key)
    client.setex.side_effect = setex
    client.delete.side_effect = delete
    client.ttl.return_value = 300
    return client

@pytest.fixture
def cache_manager(mock_redis):
    return CacheManager(mock_redis)
