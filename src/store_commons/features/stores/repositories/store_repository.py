"""Store repository implementation using the database infrastructure.

Accepts any DatabaseRepository and schema name, so services choose the
connection and schema.
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional

from ....core.exceptions import DuplicateResourceError, StoreNotFoundError, QueryError
from ....core.value_objects import StoreId
from ...database.entities.protocols import DatabaseRepository
from ..entities.store import Store
from ..utils.queries import (
    STORE_INSERT,
    STORE_UPDATE,
    STORE_DELETE_GUARDED,
    STORE_GET_BY_ID,
    STORE_LIST_ALL_SORTED,
    STORE_LIST_BY_DISCOUNT,
    STORE_EXISTS_BY_ID,
    STORE_CREATE_TABLE,
)

logger = logging.getLogger(__name__)

UNIQUE_VIOLATION = "23505"


class StoreDatabaseRepository:
    """Database repository for store operations."""
    
    def __init__(self, database_repository: DatabaseRepository, schema: str = "public"):
        """Initialize with existing database repository.
        
        Args:
            database_repository: Executes the SQL
            schema: Database schema holding the stores table
        """
        self._db = database_repository
        self._schema = schema
        self._table = f"{schema}.stores"
    
    async def create_schema(self) -> None:
        """Create the stores table if it does not exist."""
        await self._db.execute_command(STORE_CREATE_TABLE.format(schema=self._schema))
    
    async def insert(self, store: Store) -> Store:
        """Insert store into database."""
        query = STORE_INSERT.format(schema=self._schema)
        try:
            row = await self._db.execute_fetchrow(
                query,
                store.id.value,
                store.name,
                store.url,
                store.display_order,
                sorted(store.applied_discounts),
                store.created_at,
                store.updated_at,
            )
        except QueryError as e:
            if e.details.get("sqlstate") == UNIQUE_VIOLATION:
                raise DuplicateResourceError(
                    f"Store '{store.id.value}' already exists",
                    details={"store_id": store.id.value},
                )
            raise
        
        if not row:
            raise QueryError(f"Insert into {self._table} returned no row")
        
        logger.info(f"Inserted store {store.id.value} into {self._table}")
        return self._map_row_to_store(row)
    
    async def update(self, store: Store) -> Store:
        """Replace all mutable columns of store."""
        store.updated_at = datetime.now(timezone.utc)
        query = STORE_UPDATE.format(schema=self._schema)
        row = await self._db.execute_fetchrow(
            query,
            store.id.value,
            store.name,
            store.url,
            store.display_order,
            sorted(store.applied_discounts),
            store.updated_at,
        )
        
        if not row:
            raise StoreNotFoundError(store.id.value)
        
        logger.info(f"Updated store {store.id.value} in {self._table}")
        return self._map_row_to_store(row)
    
    async def delete(self, store: Store) -> bool:
        """Delete store unless it is the last one remaining."""
        query = STORE_DELETE_GUARDED.format(schema=self._schema)
        status = await self._db.execute_command(query, store.id.value)
        
        # Command status has the form "DELETE <count>"
        deleted = status.split()[-1] != "0"
        if deleted:
            logger.info(f"Deleted store {store.id.value} from {self._table}")
        return deleted
    
    async def get_by_id(self, store_id: StoreId) -> Optional[Store]:
        """Get store by ID."""
        query = STORE_GET_BY_ID.format(schema=self._schema)
        row = await self._db.execute_fetchrow(query, store_id.value)
        return self._map_row_to_store(row) if row else None
    
    async def find_all_sorted(self) -> List[Store]:
        """List stores ordered by display order."""
        query = STORE_LIST_ALL_SORTED.format(schema=self._schema)
        rows = await self._db.execute_query(query)
        return [self._map_row_to_store(row) for row in rows]
    
    async def find_by_discount(self, discount_id: str) -> List[Store]:
        """List stores with discount_id applied."""
        query = STORE_LIST_BY_DISCOUNT.format(schema=self._schema)
        rows = await self._db.execute_query(query, discount_id)
        return [self._map_row_to_store(row) for row in rows]
    
    async def exists(self, store_id: StoreId) -> bool:
        """Check if store exists."""
        query = STORE_EXISTS_BY_ID.format(schema=self._schema)
        return bool(await self._db.execute_fetchval(query, store_id.value))
    
    def _map_row_to_store(self, row) -> Store:
        """Map database row to Store entity."""
        return Store.from_dict(dict(row))
