"""
Pytest configuration and fixtures.
Provides an in-memory identity store, user fixtures and an HTTP client for the API.
"""
import pytest
from typing import AsyncGenerator, List
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.pool import StaticPool

from services.identity_store import IdentityStore
from models.user import User
from dao.user_dao import UserDAO

# Test database URL (in-memory SQLite for testing)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

class RecordingVerificationSender:
    """Sender double that remembers every handed-off address."""

    def __init__(self):
        self.sent: List[str] = []

    async def send_verification(self, email: str) -> None:
        self.sent.append(email)

@pytest.fixture
async def identity_store() -> AsyncGenerator[IdentityStore, None]:
    """Identity store on a fresh in-memory database with all tables created."""
    store = IdentityStore.open(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False
    )
    await store.create_schema()

    yield store

    await store.dispose()

@pytest.fixture
async def db_session(identity_store: IdentityStore) -> AsyncGenerator[AsyncSession, None]:
    async with identity_store.session() as session:
        yield session
        await session.rollback()

@pytest.fixture
async def unverified_user(db_session: AsyncSession) -> User:
    """A registered user who has not confirmed their email yet."""
    return await UserDAO(db_session).create_user(
        User(email="pending@example.com", full_name="Pending User", is_verified=False)
    )

@pytest.fixture
async def verified_user(db_session: AsyncSession) -> User:
    return await UserDAO(db_session).create_user(
        User(email="verified@example.com", full_name="Verified User", is_verified=True)
    )

@pytest.fixture
def sender() -> RecordingVerificationSender:
    return RecordingVerificationSender()

@pytest.fixture
async def client(identity_store: IdentityStore, sender: RecordingVerificationSender) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client bound to the app, with the test store and a recording sender."""
    from main import app
    from api.email_verification import get_verification_sender

    app.state.identity_store = identity_store
    app.dependency_overrides[get_verification_sender] = lambda: sender

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as ac:
        yield ac

    app.dependency_overrides.clear()
    del app.state.identity_store

def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
