"""
Smoke tests for the SQLRepository against a temporary SQLite database.
"""
from __future__ import annotations

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Garante que o pacote clients_api seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from clients_api.app import create_app  # noqa: E402
from clients_api.core import config as core_config  # noqa: E402
from clients_api.core.config import Settings  # noqa: E402
from clients_api.db import models  # noqa: E402
from clients_api.db import session as db_session  # noqa: E402
from clients_api.domain.clients import Client  # noqa: E402
from clients_api.repositories.sql_repository import SQLRepository  # noqa: E402
from clients_api.services.client_service import ClientService  # noqa: E402


def _clear_caches() -> None:
    core_config.get_settings.cache_clear()
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]


@pytest.fixture()
def temp_db(tmp_path, monkeypatch):
    """Configura um SQLite temporário e garante teardown completo para não deixar o arquivo bloqueado no Windows."""
    db_file = tmp_path / "test.db"
    url = f"sqlite:///{db_file}"
    monkeypatch.setenv("DATABASE_URL", url)
    monkeypatch.setenv("CLIENTS_STORAGE", "sql")
    # limpa caches para forçar re-leitura de envs
    _clear_caches()

    engine = db_session.get_engine(url)
    models.Base.metadata.drop_all(bind=engine)
    models.Base.metadata.create_all(bind=engine)

    yield url

    models.Base.metadata.drop_all(bind=engine)
    engine.dispose()
    _clear_caches()


def test_client_crud_flow(temp_db):
    repo = SQLRepository(temp_db)
    repo.add(Client(id=1, name="Ana", email="ana@x.com"))
    repo.add(Client(id=2, name="Bia"))

    assert repo.get(1) == Client(id=1, name="Ana", email="ana@x.com")
    assert [c.id for c in repo.load_all()] == [1, 2]

    assert repo.replace(Client(id=2, name="Beatriz", phone="11")) is not None
    assert repo.replace(Client(id=3, name="Nobody")) is None
    assert repo.get(2).phone == "11"

    assert repo.delete(1) is True
    assert repo.delete(1) is False
    assert repo.get(1) is None
    assert repo.dump() == [
        {"id": 2, "name": "Beatriz", "cpf": "", "email": "", "phone": "11", "birthdate": ""}
    ]


def test_service_over_sql_assigns_ids(temp_db):
    svc = ClientService(SQLRepository(temp_db))
    svc.create_client(Client(name="A"))
    svc.create_client(Client(name="B"))
    svc.delete_client(2)
    assert svc.create_client(Client(name="C")).id == 2


def test_http_over_sql_backend(temp_db):
    api = TestClient(create_app())
    resp = api.post("/client", json={"name": "Ana"})
    assert resp.status_code == 201
    assert api.get("/client").json() == [resp.json()]
    assert api.put("/client/1", json={"cpf": "999"}).json()["cpf"] == "999"
    assert api.delete("/client/1").status_code == 204


@pytest.mark.parametrize("method", ["get", "put", "delete"])
def test_out_of_range_id_is_400_over_sql(temp_db, method):
    api = TestClient(create_app())
    kwargs = {"json": {"name": "x"}} if method == "put" else {}
    resp = getattr(api, method)("/client/" + "9" * 30, **kwargs)
    assert resp.status_code == 400
    assert resp.text == "Invalid client ID"


def test_explicit_settings_choose_the_database(temp_db, tmp_path):
    explicit_file = tmp_path / "explicit.db"
    explicit_url = f"sqlite:///{explicit_file}"
    settings = Settings(
        storage_backend="sql",
        data_file=str(tmp_path / "unused.json"),
        database_url=explicit_url,
        id_strategy="max",
        host="127.0.0.1",
        port=5000,
        log_level="INFO",
    )
    api = TestClient(create_app(settings))

    assert api.post("/client", json={"name": "Ana"}).status_code == 201

    assert explicit_file.exists()
    assert [c.name for c in SQLRepository(explicit_url).load_all()] == ["Ana"]
    assert SQLRepository(temp_db).load_all() == []
    db_session.get_engine(explicit_url).dispose()
