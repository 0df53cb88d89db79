import os
import sys

import pytest

ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from petcare import create_app
from petcare.extensions import db


def _assert_memory_db(uri: str):
    if uri != "sqlite:///:memory:":
        raise RuntimeError(
            f"Refusing to run tests on non-memory DB: {uri!r}. "
            "This guard protects your real database."
        )


@pytest.fixture(scope="function")
def app():
    os.environ.pop("DATABASE_URL", None)

    flask_app = create_app("config.TestingConfig")

    _assert_memory_db(flask_app.config["SQLALCHEMY_DATABASE_URI"])

    with flask_app.app_context():
        db.create_all()
        yield flask_app
        _assert_memory_db(flask_app.config["SQLALCHEMY_DATABASE_URI"])
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def make_owner(client):
    def _make_owner(name: str = "Ana", **fields):
        rv = client.post("/owners", json={"name": name, **fields})
        assert rv.status_code == 201, rv.get_json()
        return rv.get_json()["id"]
    return _make_owner


@pytest.fixture()
def make_pet(client, make_owner):
    def _make_pet(name: str = "Rex", species: str = "Perro", owner_id=None, **fields):
        if owner_id is None:
            owner_id = make_owner()
        rv = client.post(
            "/pets", json={"name": name, "species": species, "owner_id": owner_id, **fields}
        )
        assert rv.status_code == 201, rv.get_json()
        return rv.get_json()["id"]
    return _make_pet


@pytest.fixture()
def sample_data(client, make_owner, make_pet):
    owner_id = make_owner("Ana", email="ana@example.com", phone="555-0100")
    pet_id = make_pet(
        "Rex",
        "Perro",
        owner_id=owner_id,
        breed="Labrador",
        age=3,
        weight=20.5,
        health_condition="Sano",
    )
    vaccine_ids = []
    for name, day in (("Rabies", "2025-01-10"), ("Parvovirus", "2025-06-01"), ("Distemper", "2024-11-20")):
        rv = client.post(
            "/vaccines", json={"name": name, "application_date": day, "pet_id": pet_id}
        )
        vaccine_ids.append(rv.get_json()["id"])
    care_ids = []
    for kind, day in (("Bath", "2025-03-05"), ("Checkup", "2025-08-15")):
        rv = client.post(
            "/care-events", json={"type": kind, "date": day, "pet_id": pet_id}
        )
        care_ids.append(rv.get_json()["id"])
    return {
        "owner_id": owner_id,
        "pet_id": pet_id,
        "vaccine_ids": vaccine_ids,
        "care_ids": care_ids,
    }
