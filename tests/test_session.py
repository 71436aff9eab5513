"""Tests pour la création de session."""

import json
from datetime import datetime, timezone

import pytest

from exceptions import MalformedResponse, TransportError
from smite_client.session import Session, SessionManager, SessionState


class _StubTransport:
    """Transport url → corps qui enregistre les URLs demandées."""

    def __init__(self, body=None, error=None):
        self.body = body
        self.error = error
        self.urls = []

    def __call__(self, url):
        self.urls.append(url)
        if self.error is not None:
            raise self.error
        return self.body


class TestCreateSession:
    """Tests de bout en bout avec transport simulé."""

    def test_end_to_end(self, credentials, frozen_clock, session_response):
        frozen_clock("20230101120030")
        transport = _StubTransport(session_response)
        manager = SessionManager(credentials, transport=transport)

        session = manager.create_session()

        assert session.id == "abc123"
        assert session.timestamp == "20230101120015"
        assert manager.state is SessionState.ESTABLISHED
        assert len(transport.urls) == 1
        assert "/createsessionjson/1234/" in transport.urls[0]
        assert transport.urls[0].endswith("/20230101120030")

    def test_server_timestamp_is_overwritten(self, credentials, frozen_clock):
        frozen_clock("20230101120005")
        body = json.dumps({"id": "abc123", "timestamp": "1/1/2023 12:00:05 PM"})

        session = SessionManager(credentials, transport=_StubTransport(body)).create_session()

        assert session.timestamp == "20230101115950"

    def test_live_api_field_name(self, credentials, frozen_clock):
        body = json.dumps({
            "ret_msg": "Approved",
            "session_id": "1465AFCA32DBDB800BEF8C72F296C3D3",
            "timestamp": "1/1/2023 12:00:30 PM",
        })

        session = SessionManager(credentials, transport=_StubTransport(body)).create_session()

        assert session.id == "1465AFCA32DBDB800BEF8C72F296C3D3"

    def test_each_call_creates_new_session(self, credentials, frozen_clock, session_response):
        transport = _StubTransport(session_response)
        manager = SessionManager(credentials, transport=transport)

        first = manager.create_session()
        second = manager.create_session()

        assert first is not second
        assert len(transport.urls) == 2


class TestCreateSessionErrors:
    """Tests des chemins d'échec."""

    def test_transport_failure(self, credentials):
        manager = SessionManager(
            credentials,
            transport=_StubTransport(error=TransportError("Connexion impossible Smite", None)),
        )

        with pytest.raises(TransportError):
            manager.create_session()
        assert manager.state is SessionState.UNINITIALIZED

    def test_unexpected_transport_exception_resets_state(self, credentials):
        manager = SessionManager(
            credentials,
            transport=_StubTransport(error=RuntimeError("transport cassé")),
        )

        with pytest.raises(RuntimeError, match="transport cassé"):
            manager.create_session()
        assert manager.state is SessionState.UNINITIALIZED

    def test_transport_failure_is_not_retried(self, credentials):
        transport = _StubTransport(error=TransportError("boom", 503))
        manager = SessionManager(credentials, transport=transport)

        with pytest.raises(TransportError):
            manager.create_session()
        assert len(transport.urls) == 1

    def test_invalid_json(self, credentials):
        manager = SessionManager(credentials, transport=_StubTransport("<html>oops</html>"))

        with pytest.raises(MalformedResponse) as exc_info:
            manager.create_session()
        assert not isinstance(exc_info.value, TransportError)
        assert manager.state is SessionState.UNINITIALIZED

    @pytest.mark.parametrize("body", [
        json.dumps([{"id": "abc123"}]),
        json.dumps({"timestamp": "x"}),
        json.dumps({"id": ""}),
        json.dumps({"id": 42}),
        "null",
    ])
    def test_unexpected_shape(self, credentials, body):
        manager = SessionManager(credentials, transport=_StubTransport(body))

        with pytest.raises(MalformedResponse):
            manager.create_session()

    def test_error_message_is_reported(self, credentials):
        body = json.dumps({"ret_msg": "Invalid signature", "session_id": None})
        manager = SessionManager(credentials, transport=_StubTransport(body))

        with pytest.raises(MalformedResponse, match="Invalid signature"):
            manager.create_session()


class TestSession:
    """Tests pour le modèle Session."""

    def test_expires_after_fifteen_minutes(self):
        session = Session(id="abc123", timestamp="20230101120015")

        assert session.expires_at() == datetime(2023, 1, 1, 12, 15, 15, tzinfo=timezone.utc)
        assert not session.is_expired(datetime(2023, 1, 1, 12, 15, 14, tzinfo=timezone.utc))
        assert session.is_expired(datetime(2023, 1, 1, 12, 15, 15, tzinfo=timezone.utc))

    def test_from_payload_keeps_raw_timestamp(self):
        session = Session.from_payload({"id": "abc123", "timestamp": "ignored"})
        assert session == Session(id="abc123", timestamp="ignored")
