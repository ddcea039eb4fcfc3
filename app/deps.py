from __future__ import annotations

from typing import Annotated, TypeAlias

from fastapi import Depends

from db.store import JsonStore, get_store

StoreDep: TypeAlias = Annotated[JsonStore, Depends(get_store)]
