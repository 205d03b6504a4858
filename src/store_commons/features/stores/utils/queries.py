"""Store SQL query constants.

Queries are parameterized by schema name via str.format and by values via
asyncpg positional parameters.
"""

STORE_INSERT = """
    INSERT INTO {schema}.stores (
        id, name, url, display_order, applied_discounts, created_at, updated_at
    ) VALUES (
        $1, $2, $3, $4, $5, $6, $7
    ) RETURNING *
"""

STORE_UPDATE = """
    UPDATE {schema}.stores SET
        name = $2,
        url = $3,
        display_order = $4,
        applied_discounts = $5,
        updated_at = $6
    WHERE id = $1
    RETURNING *
"""

# Rows are locked before counting so that concurrent deletes cannot both
# observe more than one remaining store.
STORE_DELETE_GUARDED = """
    WITH locked AS (
        SELECT id FROM {schema}.stores ORDER BY id FOR UPDATE
    )
    DELETE FROM {schema}.stores
    WHERE id = $1 AND (SELECT count(*) FROM locked) > 1
"""

STORE_GET_BY_ID = """
    SELECT * FROM {schema}.stores WHERE id = $1
"""

# Ties on display_order keep insertion order
STORE_LIST_ALL_SORTED = """
    SELECT * FROM {schema}.stores
    ORDER BY display_order ASC, created_at ASC, id ASC
"""

STORE_LIST_BY_DISCOUNT = """
    SELECT * FROM {schema}.stores
    WHERE $1 = ANY(applied_discounts)
    ORDER BY display_order ASC, created_at ASC, id ASC
"""

STORE_EXISTS_BY_ID = """
    SELECT EXISTS(SELECT 1 FROM {schema}.stores WHERE id = $1)
"""

STORE_CREATE_TABLE = """
    CREATE TABLE IF NOT EXISTS {schema}.stores (
        id TEXT PRIMARY KEY,
        name TEXT NOT NULL,
        url TEXT NOT NULL DEFAULT '',
        display_order INTEGER NOT NULL DEFAULT 0,
        applied_discounts TEXT[] NOT NULL DEFAULT '{{}}',
        created_at TIMESTAMPTZ NOT NULL DEFAULT now(),
        updated_at TIMESTAMPTZ NOT NULL DEFAULT now()
    )
"""
