"""
Test fixtures - in-memory SQLite database + HTTP client
"""
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker

from inventory_api.database import Base, get_db
from inventory_api.main import app
from inventory_api.models import Category, InventoryItem


@pytest_asyncio.fixture()
async def db_session():
    """Create a fresh in-memory SQLite database for each test"""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with session_factory() as session:
        yield session

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture()
async def seed_data(db_session):
    """Insert baseline test data: one category + two items in it"""
    toys = Category(
        id="666fff666",
        category_id=5000,
        category_name="Board Games",
        description="Games played on a table.",
    )
    chess = InventoryItem(
        category_id=5000,
        supplier_id=1,
        name="Chess Set",
        description="Wooden pieces, folding board.",
        quantity=3,
        price=24.5,
        date_created="2024-09-04T21:39:36.605Z",
    )
    checkers = InventoryItem(
        category_id=5000,
        supplier_id=2,
        name="Checkers",
        description="Red and black.",
        quantity=0,
        price=9.99,
        date_created="2024-09-05T10:00:00.000Z",
    )

    db_session.add_all([toys, chess, checkers])
    await db_session.commit()
    await db_session.refresh(toys)
    await db_session.refresh(chess)
    await db_session.refresh(checkers)

    return {"category": toys, "chess": chess, "checkers": checkers}


@pytest_asyncio.fixture()
async def client(db_session):
    """httpx AsyncClient bound to the FastAPI app"""

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test", follow_redirects=True) as ac:
        yield ac

    app.dependency_overrides.clear()
