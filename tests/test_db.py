from __future__ import annotations

import certifi
import pytest

from fec_pipeline import db


def test_get_client_plain_uri_skips_tls(monkeypatch: pytest.MonkeyPatch) -> None:
    seen: dict = {}

    def fake_client(uri, **options):
        seen.update(uri=uri, **options)
        return "client"

    monkeypatch.setattr(db, "MongoClient", fake_client)
    assert db.get_client("mongodb://localhost:27017") == "client"
    assert seen["uri"] == "mongodb://localhost:27017"
    assert "tls" not in seen
    assert seen["serverSelectionTimeoutMS"] == 30000


def test_get_client_srv_uri_uses_certifi(monkeypatch: pytest.MonkeyPatch) -> None:
    seen: dict = {}
    monkeypatch.setattr(db, "MongoClient", lambda uri, **options: seen.update(options))
    db.get_client("mongodb+srv://user:pw@cluster.example.net")
    assert seen["tls"] is True
    assert seen["tlsCAFile"] == certifi.where()


def test_get_db_indexes_client() -> None:
    assert db.get_db({"fec": "database"}, "fec") == "database"  # type: ignore[arg-type]
