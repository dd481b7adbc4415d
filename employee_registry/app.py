from fastapi import FastAPI
from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from typing import Optional
import redis
import logging

from .cache.manager import CacheManager
from .database.connection import (
    create_db_engine, create_redis_client, create_session_factory, create_tables
)
from .routes.employees import router as employees_router

logger = logging.getLogger(__name__)

VERSION = "1.0.0"

_UNSET = object()

def create_app(engine: Optional[Engine] = None, redis_client=_UNSET) -> FastAPI:
    """Build the API with explicitly constructed store and cache clients

    Pass redis_client=None to run with the cache disabled.
    """
    if engine is None:
        engine = create_db_engine()
    if redis_client is _UNSET:
        redis_client = create_redis_client()
    
    app = FastAPI(
        title="Employee Registry API",
        version=VERSION,
        description="Employee CRUD with a cached employee list"
    )
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    app.state.redis_client = redis_client
    app.state.cache_manager = CacheManager(redis_client)
    
    @app.on_event("startup")
    def startup_event():
        """Create tables on startup"""
        try:
            create_tables(engine)
        except SQLAlchemyError as e:
            logger.error(f"Startup failed: {e}")
            raise
        
        if app.state.cache_manager.enabled:
            logger.info("Redis cache enabled")
        else:
            logger.warning("Redis not available - cache disabled")
    
    @app.on_event("shutdown")
    def shutdown_event():
        """Release store and cache connections"""
        if redis_client is not None:
            try:
                redis_client.close()
            except redis.exceptions.RedisError as e:
                logger.warning(f"Error closing Redis client: {e}")
        engine.dispose()
        logger.info("Store and cache connections released")
    
    app.include_router(employees_router)
    
    @app.get("/")
    def root():
        return {
            "message": "Employee Registry API",
            "version": VERSION,
            "status": "running"
        }
    
    @app.get("/health")
    def health_check():
        """Health check endpoint for monitoring"""
        try:
            with engine.connect() as connection:
                connection.execute(text("SELECT 1"))
            database_status = "connected"
        except SQLAlchemyError as e:
            logger.error(f"Database health check failed: {e}")
            database_status = "disconnected"
        
        cache_health = app.state.cache_manager.health_check()
        
        return {
            "status": "healthy" if database_status == "connected" else "degraded",
            "database": database_status,
            "redis": cache_health["status"],
            "version": VERSION,
            "features": {
                "caching": app.state.cache_manager.enabled
            }
        }
    
    return app
