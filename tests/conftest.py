"""Configuration pytest pour smite_client."""

import json
import os
import sys
from datetime import datetime, timezone
from pathlib import Path
from unittest.mock import patch

import pytest

# Ajouter le répertoire src au path pour les imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from config.credentials import Credentials  # noqa: E402


class MockResponse:
    """Réponse httpx-like minimale."""

    def __init__(self, status_code=200, text=""):
        self.status_code = status_code
        self.text = text


class SeqClient:
    """Client httpx-like dont get() renvoie une séquence de réponses/erreurs."""

    def __init__(self, seq):
        self._seq = list(seq)
        self.urls = []

    def get(self, url, **kwargs):
        self.urls.append(url)
        item = self._seq.pop(0)
        if isinstance(item, Exception):
            raise item
        return item


@pytest.fixture
def credentials():
    """Credentials de test."""
    return Credentials(dev_id="1234", auth_token="ABCDEF0123456789ABCDEF0123456789")


@pytest.fixture
def token_file(tmp_path):
    """Fichier token.json valide."""
    path = tmp_path / "resources" / "token.json"
    path.parent.mkdir()
    path.write_text(
        json.dumps({"dev_id": "1234", "token": "ABCDEF0123456789ABCDEF0123456789"}),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def mock_env_vars():
    """Mock des variables d'environnement pour les tests."""
    with patch.dict(os.environ, {
        "SMITE_DEV_ID": "4321",
        "SMITE_AUTH_TOKEN": "ENVTOKEN0123456789",
        "SMITE_API_URL": "http://example.test/smiteapi.svc",
        "TIMEOUT": "20",
        "LOG_LEVEL": "debug",
    }):
        yield


@pytest.fixture
def frozen_clock(monkeypatch):
    """
    Fige l'horloge du client. Retourne un setter prenant "YYYYMMDDHHMMSS".
    """
    state = {}

    def _set(value: str):
        state["now"] = datetime.strptime(value, "%Y%m%d%H%M%S").replace(tzinfo=timezone.utc)

    monkeypatch.setattr("smite_client.auth._utcnow", lambda: state["now"])
    _set("20230101120030")
    return _set


@pytest.fixture
def session_response():
    """Réponse createsession typique."""
    return json.dumps({"id": "abc123", "timestamp": "ignored"})
