"""
Database connection and session management for the Contact Manager API
This module sets up the async SQLAlchemy engine with proper session management.
Supports local PostgreSQL, AWS RDS and SQLite (aiosqlite) with connection
pooling and error handling. One session is one transaction.
"""

import logging
from contextlib import asynccontextmanager

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from config import settings
from models import Base

# Configure logging
logger = logging.getLogger(__name__)


def _hide_credentials(database_url: str) -> str:
    scheme, _, rest = database_url.partition("://")
    if "@" not in rest:
        return database_url
    return f"{scheme}://[HIDDEN]@{rest.rsplit('@', 1)[1]}"


class DatabaseManager:
    """
    Database connection manager that handles the async SQLAlchemy engine,
    session creation, and connection lifecycle management

    The engine is created lazily on first use so that configuration can be
    adjusted (tests, Lambda cold start) before anything connects.
    """

    def __init__(self):
        self._engine = None
        self._session_factory = None

    def _create_engine(self):
        """Create database engine with appropriate settings for environment"""
        database_url = settings.get_active_database_url()
        logger.info(f"Initializing database connection to: {_hide_credentials(database_url)}")

        if settings.is_sqlite():
            # One shared connection so in-memory databases survive across sessions
            return create_async_engine(
                database_url,
                echo=settings.DEBUG,
                poolclass=StaticPool,
                connect_args={"check_same_thread": False}
            )

        if settings.is_lambda_environment():
            # Lambda-optimized settings for RDS Proxy
            return create_async_engine(
                database_url,
                echo=settings.DEBUG,
                pool_pre_ping=True,
                pool_size=1,
                max_overflow=0,
                pool_recycle=3600,
                pool_timeout=10,
                connect_args={
                    "command_timeout": 10,
                    "server_settings": {
                        "application_name": "contact-manager-lambda",
                    }
                }
            )

        return create_async_engine(
            database_url,
            echo=settings.DEBUG,
            pool_pre_ping=True,  # Validate connections before use
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
            pool_timeout=settings.DB_POOL_TIMEOUT,
            connect_args={
                "server_settings": {
                    "application_name": "contact-manager-local",
                }
            }
        )

    @property
    def engine(self):
        """Get database engine, creating it if necessary"""
        if self._engine is None:
            self._engine = self._create_engine()
        return self._engine

    @property
    def session_factory(self):
        """Get session factory, creating it if necessary"""
        if self._session_factory is None:
            self._session_factory = async_sessionmaker(
                self.engine,
                class_=AsyncSession,
                expire_on_commit=False,  # Returned contacts are read after commit
                autoflush=False
            )
        return self._session_factory

    async def create_tables(self):
        """Create all database tables defined in models"""
        try:
            logger.info("Creating database tables...")
            async with self.engine.begin() as connection:
                await connection.run_sync(Base.metadata.create_all)
            logger.info("Database tables created successfully")
        except Exception as e:
            logger.error(f"Failed to create database tables: {e}")
            raise

    async def test_connection(self) -> bool:
        """Test database connection"""
        try:
            async with self.engine.connect() as connection:
                await connection.execute(text("SELECT 1"))
            logger.debug("Database connection test successful")
            return True
        except Exception as e:
            logger.error(f"Database connection test failed: {e}")
            return False

    @asynccontextmanager
    async def get_session(self):
        """
        Context manager for database sessions with automatic cleanup
        Commits when the block succeeds and rolls back on any error.
        Usage:
            async with db_manager.get_session() as session:
                # database operations
        """
        session = self.session_factory()
        try:
            yield session
            await session.commit()
        except Exception as e:
            await session.rollback()
            logger.error(f"Database session error: {e}")
            raise
        finally:
            await session.close()

    async def dispose(self):
        """Close pooled connections and forget the engine"""
        if self._engine is not None:
            await self._engine.dispose()
            logger.info("Database engine disposed")
        self._engine = None
        self._session_factory = None


# Global database manager instance
db_manager = DatabaseManager()
