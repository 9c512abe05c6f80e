import pytest

from snippetbox import create_app
from snippetbox.extensions import db
from config import Config
from snippetbox.models import User
from werkzeug.security import generate_password_hash


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = "test-secret-key"
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    AUTO_CREATE_DB = False


@pytest.fixture
def app():
    app = create_app(TestConfig)

    with app.app_context():
        db.drop_all()
        db.create_all()

    yield app

    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def user_id(app):
    with app.app_context():
        u = User(
            username="testuser",
            password_hash=generate_password_hash("password123"),
        )
        db.session.add(u)
        db.session.commit()

        uid = u.id  # read before the session goes away
        return uid
