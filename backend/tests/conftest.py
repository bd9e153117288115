"""
Point the app at a throwaway SQLite file before anything from fittrack is
imported, then build the schema once for the whole run.
"""
import os
import tempfile
import uuid

import pytest

_DB_PATH = os.path.join(tempfile.gettempdir(), f"fittrack-test-{uuid.uuid4().hex[:8]}.db")
os.environ["DATABASE_URL"] = f"sqlite:///{_DB_PATH}"
os.environ.setdefault("SECRET_KEY", "test-secret")

from fittrack.db import Base, engine  # noqa: E402
from fittrack import models  # noqa: E402,F401


@pytest.fixture(scope="session", autouse=True)
def _schema():
    Base.metadata.create_all(engine)
    yield
    Base.metadata.drop_all(engine)
    engine.dispose()
    if os.path.exists(_DB_PATH):
        os.remove(_DB_PATH)
