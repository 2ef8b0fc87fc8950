"""Pytest configuration and fixtures."""

import os

# Cheap hashes for tests; must be set before chirpy reads its settings
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.engine import make_url  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from chirpy.config import Settings  # noqa: E402
from chirpy.database import Base, engine_options, get_db, init_db  # noqa: E402
from chirpy.main import create_app  # noqa: E402

# Use test database - PostgreSQL in Docker, SQLite locally
if os.getenv("DATABASE_URL", "").startswith("postgresql"):
    # Running in Docker - use a sibling PostgreSQL test database
    url = make_url(os.environ["DATABASE_URL"])
    SQLALCHEMY_DATABASE_URL = url.set(database=f"{url.database}_test").render_as_string(
        hide_password=False
    )
else:
    # Running locally - use SQLite
    SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"

engine = create_engine(SQLALCHEMY_DATABASE_URL, **engine_options(SQLALCHEMY_DATABASE_URL))
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        from sqlalchemy_utils import create_database, database_exists

        if not database_exists(SQLALCHEMY_DATABASE_URL):
            create_database(SQLALCHEMY_DATABASE_URL)

    init_db(engine)
    yield


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = TestingSessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture
def static_dir(tmp_path):
    """A tiny static site for the /app/ mount."""
    (tmp_path / "index.html").write_text("<html><body>Welcome to Chirpy</body></html>")
    return tmp_path


def _make_client(db, settings: Settings):
    app = create_app(settings)

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)


@pytest.fixture(scope="function")
def client(db, static_dir):
    """Create a test client for an app running in development mode."""
    with _make_client(db, Settings(platform="dev", filepath_root=str(static_dir))) as test_client:
        yield test_client


@pytest.fixture(scope="function")
def prod_client(db, static_dir):
    """Create a test client for an app running outside development mode."""
    settings = Settings(platform="production", filepath_root=str(static_dir))
    with _make_client(db, settings) as test_client:
        yield test_client


@pytest.fixture
def user(client):
    """Register a user and return its JSON representation plus the password."""
    response = client.post(
        "/api/users", json={"email": "test@example.com", "password": "testpass123"}
    )
    assert response.status_code == 201
    data = response.json()
    data["password"] = "testpass123"
    return data
