from __future__ import annotations

from pydantic import TypeAdapter

from app.schemas.staff import StaffMember
from db.store import STAFF_FILE, JsonStore


_STAFF_LIST = TypeAdapter(list[StaffMember])


async def list_staff(store: JsonStore) -> list[StaffMember]:
    """List all staff members, ordered by id."""
    raw = await store.read_json(STAFF_FILE, default=[])
    return sorted(_STAFF_LIST.validate_python(raw), key=lambda s: s.id)


async def ensure_staff_file(store: JsonStore) -> bool:
    return await store.ensure_file(STAFF_FILE, [])
