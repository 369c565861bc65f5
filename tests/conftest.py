import os

# Settings are read at import time
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("PASSWORD_HASH_ROUNDS", "1000")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from legacore.database import get_db
from legacore.dependencies import get_tenant_slug
from legacore.core.security import hash_password
# Import all model classes to ensure they're registered with SQLAlchemy
from legacore.models import Base, Tenant, User
from legacore.models.enums import UserRole
# Import FastAPI app AFTER model imports
from legacore.main import app

# Test database (SQLite in-memory for speed)
# Use StaticPool to ensure all connections share the same in-memory database
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"
engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

SERVED_SLUG = "hbu-asset-recovery"


@pytest.fixture(scope="function")
def db_session():
    """Create fresh database for each test"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def served_slug():
    """Mutable holder for the tenant slug the app serves during a test"""
    return {"slug": SERVED_SLUG}


@pytest.fixture(scope="function")
def client(db_session, served_slug):
    """FastAPI test client with test database, serving SERVED_SLUG"""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_tenant_slug] = lambda: served_slug["slug"]
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def serve(served_slug):
    """Switch the tenant served by the app, e.g. serve("acme-legal")"""

    def _serve(slug: str) -> None:
        served_slug["slug"] = slug

    return _serve


def create_tenant(db, slug: str, name: str | None = None, active: bool = True) -> Tenant:
    tenant = Tenant(name=name or slug.replace("-", " ").title(), slug=slug, active=active)
    db.add(tenant)
    db.commit()
    db.refresh(tenant)
    return tenant


def create_user(db, tenant: Tenant, email: str, name: str | None = None) -> User:
    password_hash, salt = hash_password("correct-horse-battery")
    user = User(
        email=email,
        password_hash=password_hash,
        salt=salt,
        name=name,
        role=UserRole.USER,
        tenant_id=tenant.id,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def tenant(db_session):
    """The tenant served by the app"""
    return create_tenant(db_session, SERVED_SLUG, name="HBU Asset Recovery")


@pytest.fixture
def other_tenant(db_session):
    """A second tenant whose data must never leak into the served one"""
    return create_tenant(db_session, "acme-legal", name="Acme Legal")


@pytest.fixture
def member(db_session, tenant):
    """User belonging to the served tenant"""
    return create_user(db_session, tenant, "alice@hbu.example", name="Alice")


@pytest.fixture
def outsider(db_session, other_tenant):
    """User belonging to the other tenant"""
    return create_user(db_session, other_tenant, "bob@acme.example", name="Bob")


@pytest.fixture
def make_tenant(db_session):
    """Factory for extra tenants"""
    return lambda slug, **kwargs: create_tenant(db_session, slug, **kwargs)


@pytest.fixture
def make_user(db_session):
    """Factory for extra users: make_user(tenant, email)"""
    return lambda tenant, email, **kwargs: create_user(db_session, tenant, email, **kwargs)
