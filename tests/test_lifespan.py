# flake8: noqa
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))  # noqa: E402

from fastapi.testclient import TestClient

from recipes_api import app as app_module
from recipes_api.config import get_settings
from recipes_api.db import Database


def test_lifespan_opens_and_closes_database(monkeypatch):
    monkeypatch.setenv("RECIPES_DATABASE_URL", "sqlite:///:memory:")
    get_settings.cache_clear()
    saved = dict(app_module.app.dependency_overrides)
    app_module.app.dependency_overrides.clear()
    try:
        with TestClient(app_module.app) as client:
            database = app_module.app.state.database
            assert isinstance(database, Database)
            assert database.url == "sqlite:///:memory:"

            res = client.post("/recipes", json={"name": "Omelette"})
            assert res.status_code == 201
            rid = res.json()["id"]
            assert client.get(f"/recipes/{rid}").status_code == 200
            assert client.get("/health").json()["status"] == "ok"
    finally:
        app_module.app.dependency_overrides.update(saved)
        get_settings.cache_clear()
