import sys
from pathlib import Path
import pytest
from fastapi import FastAPI
from httpx import AsyncClient, ASGITransport

# Ensure the backend directory is importable so `app.*` modules resolve
_BACKEND_DIR = Path(__file__).resolve().parents[1]
if str(_BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(_BACKEND_DIR))

from app.main import create_app  # noqa: E402
from db.store import JsonStore, get_store  # noqa: E402


@pytest.fixture()
def store(tmp_path: Path) -> JsonStore:
    """JSON store rooted in a per-test temporary data directory."""
    return JsonStore(tmp_path / "data")


@pytest.fixture()
def app(store: JsonStore) -> FastAPI:
    app = create_app()
    app.dependency_overrides[get_store] = lambda: store
    yield app
    app.dependency_overrides = {}


@pytest.fixture()
async def async_client(app: FastAPI):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client


# Lightweight fallback for pytest-mock's 'mocker' fixture when the plugin isn't loaded
@pytest.fixture()
def mocker():
    from unittest.mock import (
        AsyncMock,
        create_autospec as _create_autospec,
        MagicMock,
        Mock,
        patch,
    )

    class _SimpleMocker:
        def __init__(self):
            self._patchers: list = []
            # expose common unittest.mock helpers as attributes
            self.AsyncMock = AsyncMock
            self.MagicMock = MagicMock
            self.Mock = Mock
            self.create_autospec = _create_autospec

        def patch(self, target: str, *args, **kwargs):
            p = patch(target, *args, **kwargs)
            mocked = p.start()
            self._patchers.append(p)
            return mocked

    m = _SimpleMocker()
    try:
        yield m
    finally:
        for p in reversed(m._patchers):
            p.stop()
