from datetime import datetime
from pathlib import Path
import sys
import os

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

# Safety default for any module-level app creation during test imports.
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

from qbtrust import create_app
from qbtrust.extensions import db
from qbtrust.models import Quarterback


@pytest.fixture()
def app(tmp_path: Path):
    db_file = tmp_path / "test.sqlite3"
    app = create_app(
        {
            "TESTING": True,
            "SQLALCHEMY_DATABASE_URI": f"sqlite:///{db_file}",
            "SQLALCHEMY_ENGINE_OPTIONS": {},
            "CRON_SECRET": "",
        }
    )

    with app.app_context():
        driver = db.engine.url.drivername
        if driver != "sqlite":
            raise RuntimeError(
                f"Test database must be SQLite, got '{driver}'. Refusing to run destructive test setup."
            )
        db.drop_all()
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def db_session(app):
    with app.app_context():
        yield db.session


@pytest.fixture()
def now():
    return datetime(2026, 1, 15, 12, 0, 0)


@pytest.fixture()
def make_quarterback(db_session):
    counter = {"next": 1}

    def _make(name="Josh Allen", team="Buffalo Bills", espn_id=None, is_active=True):
        if espn_id is None:
            espn_id = f"espn-{counter['next']}"
            counter["next"] += 1
        quarterback = Quarterback(
            name=name, team=team, espn_id=espn_id, is_active=is_active
        )
        db_session.add(quarterback)
        db_session.commit()
        return quarterback

    return _make


@pytest.fixture()
def quarterback(make_quarterback):
    return make_quarterback()
