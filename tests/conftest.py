import sys
from pathlib import Path

import mongomock
import pytest

# Ensure the project root is on sys.path so `import app` works in tests.
ROOT_DIR = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT_DIR))

from app import create_app  # noqa: E402
from config import TestingConfig  # noqa: E402


@pytest.fixture
def db():
    return mongomock.MongoClient().db


@pytest.fixture
def app(db, tmp_path):
    app = create_app(TestingConfig, db=db)
    app.config["UPLOAD_ROOT"] = str(tmp_path / "uploads")
    return app


@pytest.fixture
def client(app):
    return app.test_client()


MISSING_ID = "64b7f0c2a1b2c3d4e5f60718"


@pytest.fixture
def missing_id():
    """A well-formed ObjectId that no test ever inserts."""
    return MISSING_ID
