import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

import dinner_guard.domain.entities  # noqa: F401  registers every table on the metadata
from config import ApplicationConfig
from dinner_guard.adapter.cache import MemoryFlagCache
from dinner_guard.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from dinner_guard.depends import get_unit_of_work


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path}/test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)
    async with Session() as session:
        yield session


@pytest.fixture
def flag_cache():
    return MemoryFlagCache(ttl_seconds=60)


@pytest.fixture
def make_uow(db_session, flag_cache):
    """Unit of work over the test session, for tests that bypass HTTP"""

    def factory():
        return SqlAlchemyUnitOfWork(db_session, flag_cache=flag_cache)

    return factory


@pytest_asyncio.fixture
async def client(make_uow):
    from dinner_guard.api.app import create_app

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield make_uow()

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
