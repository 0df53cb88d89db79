from datetime import date
from decimal import Decimal
from types import SimpleNamespace

import pytest
from sqlalchemy import create_engine, text
from sqlalchemy.orm import Session

from petcare.errors import StorageError
from petcare.storage import SqlStore, row_to_dict


@pytest.fixture()
def store():
    engine = create_engine("sqlite://")
    with Session(engine) as session:
        session.execute(text("CREATE TABLE tags (id INTEGER PRIMARY KEY, label TEXT NOT NULL)"))
        session.commit()
        yield SqlStore(session)
    engine.dispose()


def test_insert_returns_new_ids(store):
    first = store.insert("INSERT INTO tags (label) VALUES (:label)", {"label": "a"})
    second = store.insert("INSERT INTO tags (label) VALUES (:label)", {"label": "b"})
    assert second == first + 1
    assert store.fetch_one("SELECT label FROM tags WHERE id = :id", {"id": second}) == {"label": "b"}


def test_execute_reports_affected_rows(store):
    store.insert("INSERT INTO tags (label) VALUES (:label)", {"label": "a"})
    assert store.execute("UPDATE tags SET label = :label", {"label": "z"}) == 1
    assert store.execute("DELETE FROM tags WHERE id = :id", {"id": 99}) == 0
    assert store.fetch_all("SELECT id, label FROM tags") == [{"id": 1, "label": "z"}]


def test_fetch_one_missing_row(store):
    assert store.fetch_one("SELECT * FROM tags WHERE id = :id", {"id": 1}) is None


def test_driver_failure_becomes_storage_error(store):
    with pytest.raises(StorageError) as exc:
        store.fetch_all("SELECT * FROM missing_table")
    assert "missing_table" in exc.value.detail
    assert exc.value.to_dict()["error_code"] == "STORAGE_ERROR"


def test_failed_insert_leaves_session_usable(store):
    with pytest.raises(StorageError):
        store.insert("INSERT INTO tags (label) VALUES (:label)", {"label": None})
    store.insert("INSERT INTO tags (label) VALUES (:label)", {"label": "ok"})
    assert [r["label"] for r in store.fetch_all("SELECT label FROM tags")] == ["ok"]


def test_row_to_dict_normalizes_values():
    row = {"day": date(2025, 11, 30), "weight": Decimal("20.50"), "name": "Rex"}
    assert row_to_dict(row) == {"day": "2025-11-30", "weight": 20.5, "name": "Rex"}


class _PostgresSession:
    """Session double reporting a PostgreSQL bind, where lastrowid is unset."""

    def __init__(self):
        self.statements = []

    def get_bind(self):
        return SimpleNamespace(dialect=SimpleNamespace(name="postgresql"))

    def execute(self, statement, params):
        self.statements.append(str(statement))
        return SimpleNamespace(lastrowid=None, scalar_one=lambda: 17)

    def commit(self):
        pass


def test_insert_reads_key_back_on_postgresql():
    session = _PostgresSession()
    new_id = SqlStore(session).insert(
        "INSERT INTO tags (label) VALUES (:label)\n", {"label": "a"}
    )
    assert new_id == 17
    assert session.statements == ["INSERT INTO tags (label) VALUES (:label) RETURNING id"]
