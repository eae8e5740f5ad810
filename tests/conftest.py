import os

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("GEMINI_API_KEY", "test-gemini-key")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from resumefolio.database import build_engine, create_tables, get_db
from resumefolio.database.base import Base
from resumefolio.dependencies.resume_dependencies import get_resume_parser, get_text_extractor
from resumefolio.main import app


class StubParser:
    """Returns a canned object, or raises ``error`` when one is set."""

    def __init__(self, result=None, error=None):
        self.result = result if result is not None else {}
        self.error = error
        self.calls = []

    async def parse(self, resume_text):
        self.calls.append(resume_text)
        if self.error is not None:
            raise self.error
        return self.result


class StubExtractor:
    """Records the temp path it was handed and returns fixed text."""

    def __init__(self, text="John Doe, john@x.com, 555-1234, built X, Y, Z", error=None):
        self.text = text
        self.error = error
        self.paths = []

    def extract(self, file_path, original_name):
        self.paths.append(file_path)
        assert os.path.exists(file_path)
        if self.error is not None:
            raise self.error
        return self.text


@pytest.fixture
def engine():
    engine = build_engine("sqlite://")
    create_tables(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def stub_parser():
    return StubParser(result={"name": "John Doe", "email": "john@x.com", "phone": "555-1234"})


@pytest.fixture
def stub_extractor():
    return StubExtractor()


@pytest.fixture
def client(session_factory, stub_parser, stub_extractor):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_resume_parser] = lambda: stub_parser
    app.dependency_overrides[get_text_extractor] = lambda: stub_extractor
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def signup(client, name="Ada Lovelace", email="ada@example.com", password="secret123"):
    response = client.post(
        "/api/auth/createuser",
        json={"name": name, "email": email, "password": password},
    )
    assert response.status_code == 201, response.text
    return response.json()["authtoken"]


@pytest.fixture
def token(client):
    return signup(client)


@pytest.fixture
def auth_headers(token):
    return {"auth-token": token}
