import os
import sys
import tempfile
from datetime import datetime
from pathlib import Path
from uuid import uuid4

# Keep the application's default database and logs out of the home directory
os.environ.setdefault("MAILRELAY_DATA_DIR", tempfile.mkdtemp(prefix="mailrelay-tests-"))
os.environ.setdefault("MAILRELAY_DOMAIN", "mailrelay.me")

# Add backend directory to Python path FIRST
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

# Now import after path is set
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker

from database import Base, get_db, set_sqlite_pragma
from dependencies import get_local_domain
from main import app
from models import Domain, Recipient
from services.auth_service import AuthService

LOCAL_DOMAIN = "mailrelay.me"


@pytest.fixture
def engine(tmp_path):
    """File-backed SQLite database so app and test sessions see the same data"""
    engine = create_engine(
        f"sqlite:///{tmp_path / 'test.db'}",
        connect_args={'check_same_thread': False}
    )
    event.listen(engine, "connect", set_sqlite_pragma)
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine)


@pytest.fixture
def db_session(session_factory):
    """Session for arranging data and asserting on the database"""
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def user_and_token(db_session):
    return AuthService(db_session).create_user("alice")


@pytest.fixture
def user(user_and_token):
    return user_and_token[0]


@pytest.fixture
def other_user(db_session):
    user, _ = AuthService(db_session).create_user("bob")
    return user


@pytest.fixture
def app_client(session_factory):
    """TestClient with no credentials attached"""
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_local_domain] = lambda: LOCAL_DOMAIN
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def client(app_client, user_and_token):
    """TestClient authenticated as the `user` fixture"""
    _, token = user_and_token
    app_client.headers.update({"Authorization": f"Bearer {token}"})
    return app_client


@pytest.fixture
def make_domain(db_session, user):
    def _make(owner=None, **overrides):
        values = {
            "user_id": (owner or user).id,
            "domain": f"example-{uuid4().hex[:8]}.com",
            "active": True,
        }
        values.update(overrides)
        domain = Domain(**values)
        db_session.add(domain)
        db_session.commit()
        db_session.refresh(domain)
        return domain
    return _make


@pytest.fixture
def make_recipient(db_session, user):
    """Recipients are verified unless email_verified_at=None is passed"""
    def _make(owner=None, **overrides):
        values = {
            "user_id": (owner or user).id,
            "email": f"user-{uuid4().hex[:8]}@example.net",
            "email_verified_at": datetime.utcnow(),
        }
        values.update(overrides)
        recipient = Recipient(**values)
        db_session.add(recipient)
        db_session.commit()
        db_session.refresh(recipient)
        return recipient
    return _make


@pytest.fixture
def reload(db_session):
    """Fetch a fresh copy of a row after the API changed it"""
    def _reload(model, id):
        db_session.expire_all()
        return db_session.get(model, id)
    return _reload
