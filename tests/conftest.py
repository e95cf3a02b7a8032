from pathlib import Path
import sys
import os

import pytest
from flask import g

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

# Config reads the environment at import time.
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key")

from livevote import create_app
from livevote.extensions import db, socketio
from livevote.models import Admin, Participant, PartyMember, Voter
from livevote.services.security import generate_admin_token, hash_password

ADMIN_PASSWORD = "correct-horse"


@pytest.fixture()
def app(tmp_path: Path):
    db_file = tmp_path / "test.sqlite3"
    app = create_app(
        {
            "TESTING": True,
            "SQLALCHEMY_DATABASE_URI": f"sqlite:///{db_file}",
            "SQLALCHEMY_ENGINE_OPTIONS": {},
        }
    )

    @app.before_request
    def forget_loaded_admin():
        # requests run inside the shared app context below, so ``g`` outlives them
        g.pop("_login_user", None)

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
def socket_client(app, client):
    sio = socketio.test_client(app, flask_test_client=client)
    yield sio
    if sio.is_connected():
        sio.disconnect()


@pytest.fixture()
def db_session(app):
    with app.app_context():
        yield db.session


@pytest.fixture()
def admin_user(db_session):
    admin = Admin(username="admin1", password_hash=hash_password(ADMIN_PASSWORD))
    db_session.add(admin)
    db_session.commit()
    return admin


@pytest.fixture()
def auth_headers(admin_user):
    return {"Authorization": f"Bearer {generate_admin_token(admin_user)}"}


@pytest.fixture()
def make_participant(db_session):
    def _make(party_name, **fields):
        participant = Participant(party_name=party_name, **fields)
        db_session.add(participant)
        db_session.commit()
        return participant

    return _make


@pytest.fixture()
def make_member(db_session):
    def _make(participant, member_name, position="Mayor", member_type="direct", **fields):
        member = PartyMember(
            participant_id=participant.id,
            member_name=member_name,
            position=position,
            type=member_type,
            **fields,
        )
        db_session.add(member)
        db_session.commit()
        return member

    return _make


@pytest.fixture()
def make_voter(db_session):
    def _make(voter_id, voter_name=None, citizenship_number=None):
        voter = Voter(
            voter_id=voter_id,
            voter_name=voter_name or f"Voter {voter_id}",
            citizenship_number=citizenship_number or f"CIT-{voter_id}",
        )
        db_session.add(voter)
        db_session.commit()
        return voter

    return _make
