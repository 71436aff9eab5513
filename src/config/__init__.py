#!/usr/bin/env python3
"""
Package de configuration pour le client Smite.

Ce package organise la configuration en modules séparés :
- constants.py : Constantes du contrat avec l'API
- env_validator.py : Validation des variables d'environnement
- settings_loader.py : Chargement des settings depuis .env et parameters.yaml
- credentials.py : Chargement des credentials (dev_id, token)
- timeouts.py : Configuration centralisée des timeouts
- urls.py : URL de base et noms de méthodes
"""

from .constants import (
    TIMESTAMP_FORMAT,
    TIMESTAMP_LENGTH,
    SESSION_LIFETIME_SECONDS,
    SESSION_TIMESTAMP_OFFSET_SECONDS,
    SIGNATURE_LENGTH,
    DEFAULT_CREDENTIALS_PATH,
    DEFAULT_HTTP_TIMEOUT,
    DEFAULT_LOG_LEVEL,
)
from .credentials import Credentials, load_credentials, resolve_credentials
from .settings_loader import get_settings
from .timeouts import TimeoutConfig
from .urls import URLConfig

__all__ = [
    "Credentials",
    "load_credentials",
    "resolve_credentials",
    "get_settings",
    "TimeoutConfig",
    "URLConfig",
    "TIMESTAMP_FORMAT",
    "TIMESTAMP_LENGTH",
    "SESSION_LIFETIME_SECONDS",
    "SESSION_TIMESTAMP_OFFSET_SECONDS",
    "SIGNATURE_LENGTH",
    "DEFAULT_CREDENTIALS_PATH",
    "DEFAULT_HTTP_TIMEOUT",
    "DEFAULT_LOG_LEVEL",
]
