import pytest
from httpx import ASGITransport, AsyncClient

from helpers import BIHAR_ROWS, ODISHA_ROWS, StubGenerator, write_dataset
from villageinfo.api.dependencies import get_dataset_store, get_generator
from villageinfo.api.main import app
from villageinfo.services.dataset import DatasetStore


@pytest.fixture
def dataset_dir(tmp_path):
    write_dataset(tmp_path, "Bihar", BIHAR_ROWS)
    write_dataset(tmp_path, "Odisha", ODISHA_ROWS)
    return tmp_path


@pytest.fixture
def store(dataset_dir):
    return DatasetStore(dataset_dir)


@pytest.fixture
def generator():
    return StubGenerator()


@pytest.fixture
async def client(store, generator):
    """AsyncClient with the temp-dir store and stub generator injected."""
    app.dependency_overrides[get_dataset_store] = lambda: store
    app.dependency_overrides[get_generator] = lambda: generator
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()
