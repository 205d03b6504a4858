"""
Database connection management using asyncpg for store-commons applications.
"""
from contextlib import asynccontextmanager
from typing import Any, Dict, List, Optional
import logging

import asyncpg
from asyncpg import Pool

from ....core.exceptions import QueryError

logger = logging.getLogger(__name__)


class AsyncpgDatabaseRepository:
    """DatabaseRepository over an asyncpg connection pool.
    
    The pool is created lazily on first use.
    """
    
    def __init__(self, database_url: str, app_name: str = "store-commons", **pool_config):
        """Initialize repository.
        
        Args:
            database_url: PostgreSQL DSN ("+asyncpg" driver suffix is stripped)
            app_name: Reported to the server as application_name
            **pool_config: Additional pool configuration options
        """
        self.pool: Optional[Pool] = None
        self.dsn = database_url.replace("+asyncpg", "")
        self.app_name = app_name
        
        # Pool configuration with sensible defaults
        self.pool_config = {
            "min_size": 1,
            "max_size": 10,
            "max_inactive_connection_lifetime": 300,
            "command_timeout": 60,
            **pool_config
        }
    
    async def create_pool(self) -> Pool:
        """Create and return a connection pool."""
        if self.pool is None:
            logger.info(f"Creating database pool with size {self.pool_config['max_size']}")
            self.pool = await asyncpg.create_pool(
                self.dsn,
                server_settings={"application_name": self.app_name},
                **self.pool_config
            )
            logger.info("Database pool created successfully")
        return self.pool
    
    async def close(self):
        """Close the connection pool."""
        if self.pool:
            await self.pool.close()
            self.pool = None
            logger.info("Database pool closed")
    
    @asynccontextmanager
    async def acquire(self):
        """Acquire a connection from the pool."""
        if not self.pool:
            await self.create_pool()
        
        async with self.pool.acquire() as connection:
            yield connection
    
    async def execute_query(self, query: str, *args: Any) -> List[Dict[str, Any]]:
        """Fetch multiple rows as dictionaries."""
        try:
            async with self.acquire() as connection:
                rows = await connection.fetch(query, *args)
        except asyncpg.PostgresError as e:
            raise QueryError(f"Query failed: {e}", details={"sqlstate": e.sqlstate})
        return [dict(row) for row in rows]
    
    async def execute_fetchrow(self, query: str, *args: Any) -> Optional[Dict[str, Any]]:
        """Fetch a single row as a dictionary."""
        try:
            async with self.acquire() as connection:
                row = await connection.fetchrow(query, *args)
        except asyncpg.PostgresError as e:
            raise QueryError(f"Query failed: {e}", details={"sqlstate": e.sqlstate})
        return dict(row) if row is not None else None
    
    async def execute_fetchval(self, query: str, *args: Any) -> Any:
        """Fetch a single value."""
        try:
            async with self.acquire() as connection:
                return await connection.fetchval(query, *args)
        except asyncpg.PostgresError as e:
            raise QueryError(f"Query failed: {e}", details={"sqlstate": e.sqlstate})
    
    async def execute_command(self, command: str, *args: Any) -> str:
        """Execute a command and return its status string (e.g. "DELETE 1")."""
        try:
            async with self.acquire() as connection:
                return await connection.execute(command, *args)
        except asyncpg.PostgresError as e:
            raise QueryError(f"Command failed: {e}", details={"sqlstate": e.sqlstate})
    
    async def health_check(self) -> bool:
        """Check database health."""
        try:
            async with self.acquire() as connection:
                result = await connection.fetchval("SELECT 1")
                return result == 1
        except (asyncpg.PostgresError, OSError) as e:
            logger.error(f"Database health check failed: {e}")
            return False
