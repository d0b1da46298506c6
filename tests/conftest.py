"""
Shared pytest fixtures for the EduLearn seed test suite.

Each test gets its own SQLite file under tmp_path so the seeder can dispose
of the engine and the data is still there when the test reopens it.
"""
import pytest

from config import Config
from edulearn import create_app, db


@pytest.fixture
def app(tmp_path):
    """Create a Flask app bound to an isolated, empty database."""

    class TestConfig(Config):
        TESTING = True
        SQLALCHEMY_DATABASE_URI = f"sqlite:///{tmp_path / 'seed.db'}"
        BCRYPT_LOG_ROUNDS = 4

    app = create_app(TestConfig)
    with app.app_context():
        db.create_all()
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()
        db.engine.dispose()


@pytest.fixture
def ctx(app):
    """Push an application context for tests that query the database directly."""
    with app.app_context():
        yield app


@pytest.fixture
def seeded(app):
    """Run the seeder once and return the app."""
    import seed
    assert seed.main(app) == 0
    return app


@pytest.fixture
def seed_window(app):
    """Run the seeder once and return the naive-UTC (before, after) bracket around it."""
    import seed
    from edulearn.models import utcnow
    before = utcnow()
    assert seed.main(app) == 0
    after = utcnow()
    return before, after
