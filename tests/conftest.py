"""Shared pytest fixtures: app on in-memory SQLite, schema from the models."""

import pytest

from app import create_app
from config.settings import TestConfig
from extensions import db as _db
from seeders import seed_all, seed_certificates


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        _db.create_all()
        yield app
        _db.session.remove()
        _db.drop_all()


@pytest.fixture
def db(app):
    return _db


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def seeded(app):
    """Five certificates (ids 1-5: U, PG, 12, 15, 18) plus the sample films."""
    certificates, films = seed_all()
    return certificates, films


@pytest.fixture
def certificates(app):
    """The five certificates only, no films."""
    rows = seed_certificates()
    _db.session.commit()
    return rows
