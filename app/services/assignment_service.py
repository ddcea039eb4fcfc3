from __future__ import annotations

from pydantic import TypeAdapter

from app.schemas.assignment import Assignment
from db.store import ASSIGNMENTS_FILE, JsonStore


_ASSIGNMENT_LIST = TypeAdapter(list[Assignment])


async def list_assignments(store: JsonStore) -> list[Assignment]:
    """List all assignments ordered by staff, then project, then start date."""
    raw = await store.read_json(ASSIGNMENTS_FILE, default=[])
    items = _ASSIGNMENT_LIST.validate_python(raw)
    return sorted(items, key=lambda a: (a.staff_id, a.project_id, a.start))


async def ensure_assignments_file(store: JsonStore) -> bool:
    return await store.ensure_file(ASSIGNMENTS_FILE, [])
