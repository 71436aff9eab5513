"""Tests pour la configuration du logging."""

import os
from unittest.mock import patch

from loguru import logger

from logging_setup import SensitiveDataFilter, setup_logging


class TestSensitiveDataFilter:
    """Tests du masquage des credentials."""

    def _filter(self, message):
        record = {"message": message}
        assert SensitiveDataFilter()(record) is True
        return record["message"]

    def test_masks_credentials_file_content(self):
        message = self._filter('{"dev_id": "1234", "token": "ABCDEF0123456789"}')

        assert "ABCDEF0123456789" not in message
        assert "1234" not in message

    def test_masks_env_token(self):
        message = self._filter("SMITE_AUTH_TOKEN=ABCDEF0123456789")
        assert "ABCDEF0123456789" not in message

    def test_masks_signed_link(self):
        link = (
            "http://api.smitegame.com/smiteapi.svc/getgodsjson/1234/"
            "8f53249be0922c94720834771ad43f0f/SESSIONID/20230101000000"
        )
        message = self._filter(f"Appel {link}")

        assert "8f53249be0922c94720834771ad43f0f" not in message
        assert "/1234/" not in message
        assert message.endswith("/SESSIONID/20230101000000")

    def test_leaves_other_messages(self):
        assert self._filter("Session établie") == "Session établie"


class TestSetupLogging:
    """Tests pour setup_logging."""

    def test_creates_log_directory(self, tmp_path):
        log_dir = tmp_path / "logs"
        with patch.dict(os.environ, {"LOG_DIR": str(log_dir)}):
            configured = setup_logging("DEBUG")

        try:
            assert configured is logger
            assert log_dir.is_dir()
        finally:
            logger.remove()
