"""Business logic for the student profile page."""

import datetime
from dataclasses import replace

from hoopcamp.database.records import Profile
from hoopcamp.database.tables import TABLE_PROFILES
from hoopcamp.database.utils import update_row


def split_name(name: str) -> tuple[str, str]:
    """Split a display name into first name and the rest."""
    parts = name.split()
    if not parts:
        return "", ""
    return parts[0], " ".join(parts[1:])


def update_contact_details(
    profile: Profile,
    first_name: str,
    last_name: str,
    address: str,
    mobile_no: str,
    emergency_contact_no: str,
) -> Profile | None:
    """Save the student's own details. Returns the updated profile, or None on failure.

    Blank contact fields are stored as null.
    """
    updates = {
        "name": f"{first_name.strip()} {last_name.strip()}".strip(),
        "address": address.strip() or None,
        "mobile_no": mobile_no.strip() or None,
        "emergency_contact_no": emergency_contact_no.strip() or None,
        "updated_at": datetime.datetime.now(datetime.UTC).isoformat(),
    }
    if not update_row(TABLE_PROFILES.name, profile.id, updates):
        return None
    return replace(profile, **updates)
