import io

import pytest

from app_factory import create_app
from database_init import db
from helpers import headers_for, make_category, make_user
from util.constant import ROLE_ADMIN


@pytest.fixture
def app():
    app = create_app(
        {
            "TESTING": True,
            "SQLALCHEMY_DATABASE_URI": "sqlite://",
            "SECRET_KEY": "test-secret-key",
            "JWT_SECRET": "test-jwt-secret",
            "LOG_DIR": None,
        }
    )
    with app.app_context():
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
    return make_user(app)


@pytest.fixture
def admin_id(app):
    return make_user(app, email="admin@test.com", role=ROLE_ADMIN, name="Admin")


@pytest.fixture
def user_headers(app, user_id):
    return headers_for(app, user_id)


@pytest.fixture
def admin_headers(app, admin_id):
    return headers_for(app, admin_id)


@pytest.fixture
def category_id(app):
    return make_category(app)


@pytest.fixture
def photo():
    return (io.BytesIO(b"\x89PNG fake image bytes"), "photo.png", "image/png")
