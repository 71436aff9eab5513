"""Configuration du système de logging avec loguru."""

import os
import re
import sys

from loguru import logger

try:
    from .config import get_settings
except ImportError:
    from config import get_settings


LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level:<7} | {message}"


class SensitiveDataFilter:
    """Filtre qui masque les credentials et les signatures dans les logs."""

    PATTERNS = [
        # Champs du fichier de credentials
        (r'("?token"?\s*[:=]\s*"?)([A-Za-z0-9]{8,})', r'\1***MASKED_TOKEN***'),
        (r'("?auth_token"?\s*[:=]\s*"?)([A-Za-z0-9]{8,})', r'\1***MASKED_TOKEN***'),
        (r'("?dev_id"?\s*[:=]\s*"?)([0-9]+)', r'\1***MASKED_DEV_ID***'),

        # Variables d'environnement
        (r'(SMITE_AUTH_TOKEN["\s:=]+)([^"\s,}]+)', r'\1***MASKED***'),
        (r'(SMITE_DEV_ID["\s:=]+)([^"\s,}]+)', r'\1***MASKED***'),

        # Liens signés : {method}json/{dev_id}/{signature}/...
        (r'(json/)([^/\s]+)/([a-f0-9]{32})', r'\1***DEV_ID***/***SIGNATURE***'),
    ]

    def __call__(self, record):
        """Filtre les credentials dans le message de log."""
        message = record["message"]
        for pattern, replacement in self.PATTERNS:
            message = re.sub(pattern, replacement, message, flags=re.IGNORECASE)
        record["message"] = message
        return True


def setup_logging(log_level: str = None):
    """
    Configure le système de logging avec loguru.

    Args:
        log_level: Niveau de log (LOG_LEVEL / parameters.yaml par défaut)

    Returns:
        Le logger loguru configuré
    """
    # Supprimer le handler par défaut
    logger.remove()

    if log_level is None:
        log_level = get_settings()["log_level"]

    log_dir = os.getenv("LOG_DIR", "logs")
    log_file = os.getenv("LOG_FILE", "smite_client.log")
    rotation = os.getenv("LOG_ROTATION", "10 MB")
    retention = os.getenv("LOG_RETENTION", "7 days")
    compression = os.getenv("LOG_COMPRESSION", "zip")

    sensitive_filter = SensitiveDataFilter()

    logger.add(
        sys.stdout,
        format=LOG_FORMAT,
        level=log_level,
        colorize=True,
        enqueue=False,
        backtrace=False,
        diagnose=False,
        filter=sensitive_filter,
    )
    try:
        os.makedirs(log_dir, exist_ok=True)
        logger.add(
            f"{log_dir}/{log_file}",
            format=LOG_FORMAT,
            level=log_level,
            rotation=rotation,
            retention=retention,
            compression=compression,
            enqueue=True,
            backtrace=False,
            diagnose=False,
            filter=sensitive_filter,
        )
    except OSError as e:
        # Répertoire non inscriptible : stdout uniquement
        logger.warning(f"⚠️ Fichier de log désactivé ({log_dir}/{log_file}): {e}")

    return logger
