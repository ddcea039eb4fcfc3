from __future__ import annotations

import asyncio
import json
import os
import tempfile
from pathlib import Path
from typing import Any, AsyncIterator

from core.settings import get_settings


STAFF_FILE = "staff.json"
ASSIGNMENTS_FILE = "assignments.json"
RULES_FILE = "capacityRules.json"


class JsonStore:
    """Flat JSON document store rooted at a single data directory.

    Every collection lives in its own file. Reads return the parsed
    document; writes replace the whole file atomically via a temporary
    sibling and ``os.replace`` so readers never observe a partial write.
    Concurrent writers are not coordinated: the last replace wins.
    """

    def __init__(self, data_dir: Path | str) -> None:
        self.data_dir = Path(data_dir)

    def path_for(self, name: str) -> Path:
        return self.data_dir / name

    async def read_json(self, name: str, default: Any = None) -> Any:
        """Return the parsed document ``name`` or ``default`` when missing.

        Decode errors and other I/O failures propagate to the caller.
        """
        return await asyncio.to_thread(self._read_sync, self.path_for(name), default)

    async def write_json(self, name: str, data: Any) -> None:
        await asyncio.to_thread(self._write_sync, self.path_for(name), data)

    async def ensure_file(self, name: str, default: Any) -> bool:
        """Seed ``name`` with ``default`` unless it already exists.

        Returns:
            True when the file was created.
        """
        path = self.path_for(name)
        if await asyncio.to_thread(path.exists):
            return False
        await self.write_json(name, default)
        return True

    @staticmethod
    def _read_sync(path: Path, default: Any) -> Any:
        try:
            raw = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return default
        return json.loads(raw)

    @staticmethod
    def _write_sync(path: Path, data: Any) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        # One temp file per write so concurrent writers never share it
        fd, tmp_name = tempfile.mkstemp(
            dir=path.parent, prefix=f".{path.name}.", suffix=".tmp"
        )
        tmp = Path(tmp_name)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(data, fh, indent=2)
            os.replace(tmp, path)
        finally:
            if tmp.exists():
                tmp.unlink()


async def get_store() -> AsyncIterator[JsonStore]:
    yield JsonStore(get_settings().resolved_data_dir)
