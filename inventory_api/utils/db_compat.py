"""
Database compatibility helpers for SQLite and PostgreSQL.
"""
from sqlalchemy.dialects import postgresql, sqlite


def upsert_increment(dialect_name: str, table, key_column, counter_column, key, step: int = 1):
    """
    Build a single-statement "insert or increment" that returns the new value.

    INSERT INTO table (key, counter) VALUES (:key, :step)
    ON CONFLICT (key) DO UPDATE SET counter = table.counter + :step
    RETURNING counter
    """
    if dialect_name == "sqlite":
        insert = sqlite.insert
    elif dialect_name == "postgresql":
        insert = postgresql.insert
    else:
        raise ValueError(f"Unsupported dialect for atomic counters: {dialect_name}")

    stmt = insert(table).values({key_column.name: key, counter_column.name: step})
    stmt = stmt.on_conflict_do_update(
        index_elements=[key_column],
        set_={counter_column.name: counter_column + step},
    )
    return stmt.returning(counter_column)
