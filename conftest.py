import pytest
from fastapi.testclient import TestClient

from bookmark_api.core.config import Settings
from bookmark_api.database import Database
from bookmark_api.main import create_app
from bookmark_api.models import bookmark, user  # noqa: F401

TEST_SECRET_KEY = 'test-secret-key-long-enough-for-hs256-signing'


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        app_env='test',
        database_url=f"sqlite:///{tmp_path / 'bookmarks.db'}",
        jwt_secret_key=TEST_SECRET_KEY,
        cors_origins=['http://testserver'],
        log_level='DEBUG',
    )


@pytest.fixture
def database(settings: Settings):
    db = Database(settings.database_url)
    db.create_all()
    try:
        yield db
    finally:
        db.drop_all()
        db.dispose()


@pytest.fixture
def db_session(database: Database):
    session = database.session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(settings: Settings, database: Database):
    app = create_app(settings, database)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def register(client: TestClient):
    """Sign a user up, sign them in and return bearer headers."""

    def _register(email: str, password: str = 'secret-password') -> dict[str, str]:
        signup = client.post('/auth/signup', json={'email': email, 'password': password})
        assert signup.status_code == 201, signup.text
        signin = client.post('/auth/signin', json={'email': email, 'password': password})
        assert signin.status_code == 200, signin.text
        return {'Authorization': f"Bearer {signin.json()['access_token']}"}

    return _register
