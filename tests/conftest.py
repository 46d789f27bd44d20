import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from quizapp.auth_util import get_password_hash
from quizapp.database import get_db
from quizapp.database.base_class import Base
from quizapp.main import app
from quizapp.model import Answer, Question, User


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # sqlite leaves FK actions (CASCADE / SET NULL) off unless asked
    @event.listens_for(engine, "connect")
    def enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def users(db):
    admin = User(username="admin", password=get_password_hash("admin123"), full_name="Administrator", role="admin")
    user = User(username="user", password=get_password_hash("user123"), full_name="Test User", role="user")
    db.add_all([admin, user])
    db.commit()
    return {"admin": admin, "user": user}


def login(client, username, password):
    return client.post("/api/login", json={"username": username, "password": password})


def bearer(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers(client, users):
    return bearer(login(client, "admin", "admin123").json()["token"])


@pytest.fixture
def user_headers(client, users):
    return bearer(login(client, "user", "user123").json()["token"])


@pytest.fixture
def question(db, users):
    """2 + 2 = ? with B correct."""
    q = Question(
        question_text="2 + 2 = ?",
        correct_answer="B",
        created_by=users["admin"].user_id,
        answers=[
            Answer(label="A", answer_text="3"),
            Answer(label="B", answer_text="4"),
            Answer(label="C", answer_text="5"),
        ],
    )
    db.add(q)
    db.commit()
    return q
