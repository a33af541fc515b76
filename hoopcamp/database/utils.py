"""Utility functions for Supabase database operations."""

from typing import Any, TypeVar

import pandas as pd
from postgrest.exceptions import APIError

from hoopcamp.database.client import get_supabase_client

R = TypeVar("R")


def _build_query(
    table_name: str,
    select: str = "*",
    filters: dict | None = None,
    in_filters: dict | None = None,
    order_by: str | None = None,
    ascending: bool = True,
    limit: int | None = None,
    count: str | None = None,
):
    """Compose a select query from equality filters, ordering and limit."""
    client = get_supabase_client()
    if count:
        query = client.table(table_name).select(select, count=count)
    else:
        query = client.table(table_name).select(select)

    if filters:
        for column, value in filters.items():
            query = query.eq(column, value)
    if in_filters:
        for column, values in in_filters.items():
            query = query.in_(column, list(values))
    if order_by:
        query = query.order(order_by, desc=not ascending)
    if limit:
        query = query.limit(limit)
    return query


def load_rows(
    table_name: str,
    select: str = "*",
    filters: dict | None = None,
    in_filters: dict | None = None,
    order_by: str | None = None,
    ascending: bool = True,
    limit: int | None = None,
) -> list[dict[str, Any]]:
    """Load rows from a Supabase table as a list of dictionaries.

    Args:
        table_name: Name of the Supabase table
        select: Columns to select, including embedded joins (e.g. ``"*, camps(*)"``)
        filters: Equality filters to apply (e.g. ``{"camp_id": camp_id}``)
        in_filters: Membership filters (e.g. ``{"camp_id": [id1, id2]}``)
        order_by: Column to order by
        ascending: Sort direction for ``order_by``
        limit: Maximum number of rows to return

    """
    if in_filters and any(len(values) == 0 for values in in_filters.values()):
        return []
    query = _build_query(table_name, select, filters, in_filters, order_by, ascending, limit)
    response = query.execute()
    rows = response.data or []
    print(f"✓ Loaded {len(rows)} records from '{table_name}' table in Supabase")
    return rows


def load_records(record_cls: type[R], table_name: str, **query) -> list[R]:
    """Load rows and convert each one with ``record_cls.from_row``."""
    return [record_cls.from_row(row) for row in load_rows(table_name, **query)]


def load_record(
    record_cls: type[R],
    table_name: str,
    record_id: str,
    select: str = "*",
) -> R | None:
    """Load a single row by id, or None if it does not exist."""
    rows = load_rows(table_name, select=select, filters={"id": record_id}, limit=1)
    if not rows:
        return None
    return record_cls.from_row(rows[0])


def load_dataframe_from_supabase(
        table_name: str,
        filters: dict | None = None,
        order_by: str | None = None,
        ascending: bool = True,
    ) -> pd.DataFrame:
    """Load data from a Supabase table into a pandas DataFrame."""
    rows = load_rows(table_name, filters=filters, order_by=order_by, ascending=ascending)
    return pd.DataFrame(rows)


def count_rows(
    table_name: str,
    filters: dict | None = None,
    in_filters: dict | None = None,
) -> int:
    """Count rows matching the given filters."""
    if in_filters and any(len(values) == 0 for values in in_filters.values()):
        return 0
    query = _build_query(table_name, "id", filters, in_filters, count="exact")
    response = query.execute()
    return response.count or 0


def insert_row(table_name: str, values: dict[str, Any]) -> dict[str, Any] | None:
    """Insert a row and return it as stored, or None if the write failed."""
    client = get_supabase_client()
    try:
        response = client.table(table_name).insert(values).execute()
    except APIError as e:
        print(f"✗ Failed to insert into '{table_name}': {e.message}")
        return None
    print(f"✓ Inserted 1 record into '{table_name}' table in Supabase")
    return response.data[0] if response.data else None


def update_row(table_name: str, record_id: str, values: dict[str, Any]) -> bool:
    """Update the row with the given id. Returns False if the write failed."""
    client = get_supabase_client()
    try:
        client.table(table_name).update(values).eq("id", record_id).execute()
    except APIError as e:
        print(f"✗ Failed to update '{table_name}' record {record_id}: {e.message}")
        return False
    print(f"✓ Updated record {record_id} in '{table_name}' table in Supabase")
    return True


def save_row(table_name: str, values: dict[str, Any], record_id: str | None = None) -> bool:
    """Update the row when editing an existing record, otherwise insert it."""
    if record_id:
        return update_row(table_name, record_id, values)
    return insert_row(table_name, values) is not None


def delete_row(table_name: str, record_id: str) -> bool:
    """Delete the row with the given id. Returns False if the write failed."""
    client = get_supabase_client()
    try:
        client.table(table_name).delete().eq("id", record_id).execute()
    except APIError as e:
        print(f"✗ Failed to delete '{table_name}' record {record_id}: {e.message}")
        return False
    print(f"✓ Deleted record {record_id} from '{table_name}' table in Supabase")
    return True
