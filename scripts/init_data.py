from __future__ import annotations

import asyncio
import sys
from pathlib import Path
from typing import NoReturn

# Ensure the backend root (parent of this file's directory) is on sys.path
BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))

from app.core.logging import configure_logging, logger  # noqa: E402
from app.services.assignment_service import ensure_assignments_file  # noqa: E402
from app.services.capacity_rules_service import ensure_rules_file  # noqa: E402
from app.services.staff_service import ensure_staff_file  # noqa: E402
from core.settings import get_settings  # noqa: E402
from db.store import ASSIGNMENTS_FILE, RULES_FILE, STAFF_FILE, JsonStore  # noqa: E402


async def _init_data_async(data_dir: Path) -> None:
    store = JsonStore(data_dir)
    seeded = (
        (STAFF_FILE, await ensure_staff_file(store)),
        (ASSIGNMENTS_FILE, await ensure_assignments_file(store)),
        (RULES_FILE, await ensure_rules_file(store)),
    )
    for name, created in seeded:
        if created:
            logger.info("Created %s", store.path_for(name))
        else:
            logger.info("Keeping existing %s", store.path_for(name))


def main() -> NoReturn:
    """Seed the data directory without overwriting existing files.

    The target directory is taken from the first argument, else ``DATA_DIR``.
    """
    configure_logging()
    data_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else get_settings().resolved_data_dir
    asyncio.run(_init_data_async(data_dir))
    raise SystemExit(0)


if __name__ == "__main__":
    main()
