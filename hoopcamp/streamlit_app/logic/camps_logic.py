"""Business logic for the coach camps page."""

from hoopcamp.database.records import Camp
from hoopcamp.database.tables import TABLE_CAMPS
from hoopcamp.database.utils import delete_row, load_records, save_row


def load_camps() -> list[Camp]:
    """All camps, most recent start date first."""
    return load_records(Camp, TABLE_CAMPS.name, order_by="start_date", ascending=False)


def build_camp_payload(
    name: str,
    start_date: str,
    end_date: str,
    price: str | float,
    location: str,
    description: str,
) -> dict:
    """Convert form values into a camps row; a blank description is stored as null."""
    return {
        "name": name.strip(),
        "start_date": start_date,
        "end_date": end_date,
        "price": float(price),
        "location": location.strip(),
        "description": description.strip() or None,
    }


def save_camp(payload: dict, editing_id: str | None = None) -> bool:
    return save_row(TABLE_CAMPS.name, payload, editing_id)


def delete_camp(camp_id: str) -> bool:
    return delete_row(TABLE_CAMPS.name, camp_id)
